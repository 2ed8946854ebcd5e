from dishka import Provider as DishkaProvider

from sampurnan.util.di.scope import Scope


class Provider(DishkaProvider):
    """Base for Sampurnan providers. Unscoped provides default to the unit of work."""

    scope = Scope.UOW
