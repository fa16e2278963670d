"""
Custom exceptions for cube construction, move parsing and move search
"""

class CubeError(ValueError):
    """Raised when a cube operation receives input it cannot handle"""
    def __init__(self, message: str, error_type: str = None, details: dict = None):
        self.message = message
        self.error_type = error_type or "CubeError"
        self.details = details or {}
        super().__init__(self.message)

class InvalidCubeSizeError(CubeError):
    """Raised when a cube edge length is outside the supported range"""
    def __init__(self, size, details: dict = None):
        self.size = size
        super().__init__(f"Invalid cube size {size!r}. Must be between 1 and 10", "InvalidCubeSizeError", details)

class InvalidAxisError(CubeError):
    """Raised when an axis designator is not one of X, x, Y, y, Z, z"""
    def __init__(self, axis, details: dict = None):
        self.axis = axis
        super().__init__(f"Invalid axis designator {axis!r}", "InvalidAxisError", details)

class InvalidCoordinateError(CubeError):
    """Raised when a layer coordinate is missing or outside the cube"""
    def __init__(self, message: str, value=None, details: dict = None):
        self.value = value
        super().__init__(message, "InvalidCoordinateError", details)

class CubeSizeMismatchError(CubeError):
    """Raised when two cubes of different size are compared by the search"""
    def __init__(self, src_size: int, dst_size: int, details: dict = None):
        self.src_size = src_size
        self.dst_size = dst_size
        super().__init__(
            f"Cubes are of different size. Got {src_size} and {dst_size}",
            "CubeSizeMismatchError",
            details,
        )

class InvalidSearchBoundError(CubeError):
    """Raised when the maximum sequence length is negative"""
    def __init__(self, max_len, details: dict = None):
        self.max_len = max_len
        super().__init__(f"Maximum sequence length must be non-negative, got {max_len!r}", "InvalidSearchBoundError", details)

class InvalidBrickLayoutError(CubeError):
    """Raised when explicit bricks do not cover the surface of a cube"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, "InvalidBrickLayoutError", details)
