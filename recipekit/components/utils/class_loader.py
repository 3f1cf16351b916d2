import inspect
import pkgutil
import importlib
from collections import OrderedDict


def find_components(package, directory, base_class):
    """Collect the concrete subclasses of `base_class` defined in the modules of `directory`, keyed by type."""
    components = OrderedDict()

    for module_loader, module_name, ispkg in pkgutil.iter_modules([directory]):
        if ispkg:
            continue
        full_module_name = "%s.%s" % (package, module_name)
        module = importlib.import_module(full_module_name)

        for member_name, obj in inspect.getmembers(module, inspect.isclass):
            if issubclass(obj, base_class) and obj != base_class and \
                    obj.__module__ == full_module_name and not inspect.isabstract(obj):
                if obj.type in components:
                    raise ValueError('Repeated step type: %s!' % obj.type)
                components[obj.type] = obj

    return components


class ThirdPartyComponents(object):
    def __init__(self, base_class):
        self.base_class = base_class
        self.components = OrderedDict()

    def add_component(self, obj):
        if not (inspect.isclass(obj) and issubclass(obj, self.base_class)):
            raise TypeError('add_component works only with a subclass of %s' %
                            str(self.base_class))
        if inspect.isabstract(obj):
            raise TypeError('%s does not implement %s' %
                            (obj.__name__, ', '.join(sorted(obj.__abstractmethods__))))
        if not isinstance(obj.type, str) or len(obj.type) == 0:
            raise ValueError('Step class %s must define a `type` string.' % obj.__name__)

        self.components[obj.type] = obj
