import os
import logging
import logging.config

DEFAULT_FORMAT = '[%(levelname)s] [%(asctime)s:%(name)s] %(message)s'


def _default_config(output_file=None):
    config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'simple': {'format': DEFAULT_FORMAT},
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'level': 'INFO',
                'formatter': 'simple',
                'stream': 'ext://sys.stdout',
            },
        },
        'loggers': {
            'recipekit': {
                'level': 'DEBUG',
                'handlers': ['console'],
                'propagate': False,
            },
        },
    }
    if output_file is not None:
        config['handlers']['file_handler'] = {
            'class': 'logging.FileHandler',
            'level': 'DEBUG',
            'formatter': 'simple',
            'filename': output_file,
        }
        config['loggers']['recipekit']['handlers'].append('file_handler')
    return config


def setup_logger(output_file=None, logging_config=None):
    """
    Configure the package loggers.
    :param output_file: path of a log file, the directory is created if needed.
    :param logging_config: a dict accepted by logging.config.dictConfig, replaces the default one.
    """
    if logging_config is None:
        if output_file is not None:
            dirname = os.path.dirname(output_file)
            if dirname and not os.path.exists(dirname):
                os.makedirs(dirname)
        logging_config = _default_config(output_file)
    logging.config.dictConfig(logging_config)


def get_logger(name):
    return logging.getLogger(name)
