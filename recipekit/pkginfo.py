version = '0.1.0'
package_name = 'recipekit'
