class TreeDrawerError(Exception):
    pass


class ConfigurationError(TreeDrawerError):
    pass


class CanvasError(TreeDrawerError):
    pass


class InvalidDimensionError(CanvasError):
    pass


class OutOfBoundsError(CanvasError):
    pass


class CanvasOverflowError(CanvasError):
    pass


class LayoutError(TreeDrawerError):
    pass


class NodeNotFoundError(TreeDrawerError):
    pass
