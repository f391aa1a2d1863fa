"""
car_inventory – car inventory records with a typed, paginated search.

Import path convention::

    from car_inventory.kernel.errors import FilterError
    from car_inventory.application.filtering import FilterCompiler, execute
    from car_inventory.adapters.sqlalchemy import SqlAlchemyCarStore
    from car_inventory.adapters.fastapi import create_app
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
