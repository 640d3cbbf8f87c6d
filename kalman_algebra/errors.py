"""
Error taxonomy for the matrix engine.

Every engine failure derives from MatrixError so a host can catch the whole
family at once, while each subclass still identifies which model input was
misshaped.
"""


class MatrixError(ValueError):
    """Base class for all matrix engine errors."""


class ConstructionSizeMismatch(MatrixError):
    """Flat data length does not equal rows * columns."""

    def __init__(self, size, rows, columns):
        self.size = size
        self.rows = rows
        self.columns = columns
        super().__init__(
            f"grid size {size} should equal rows * columns = {rows} * {columns}"
        )


class IndexOutOfRange(MatrixError, IndexError):
    """Element access outside the valid bounds of one axis."""

    def __init__(self, axis, position, bound):
        self.axis = axis
        self.position = position
        self.bound = bound
        super().__init__(f"{axis} index {position} out of range [0, {bound})")


class NotSquare(MatrixError):
    """Operation requires a square matrix."""

    def __init__(self, operation, shape):
        self.operation = operation
        self.shape = shape
        super().__init__(f"{operation} requires a square matrix, got {shape}")


class DimensionMismatch(MatrixError):
    """Elementwise operation received operands of differing shape."""

    def __init__(self, operation, lhs_shape, rhs_shape):
        self.operation = operation
        self.lhs_shape = lhs_shape
        self.rhs_shape = rhs_shape
        super().__init__(
            f"{operation} requires equal shapes, got {lhs_shape} and {rhs_shape}"
        )


class IncompatibleMultiplication(MatrixError):
    """Inner dimensions of a matrix product disagree."""

    def __init__(self, lhs_shape, rhs_shape):
        self.lhs_shape = lhs_shape
        self.rhs_shape = rhs_shape
        super().__init__(
            f"multiply requires lhs columns == rhs rows, got {lhs_shape} x {rhs_shape}"
        )
