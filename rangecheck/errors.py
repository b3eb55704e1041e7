from typing import Any, Literal


class TypeMismatch(TypeError):
    """Two values could not be ordered against each other.

    ``edge`` says which comparison failed: ``"start"`` or ``"end"`` when a
    value was tested against that bound, ``"bounds"`` when the start
    bound (``value``) could not be ordered against the end bound (``bound``)
    while building the range. Either way it is a programming error, so it is
    raised rather than reported as ``False``.
    """

    def __init__(
        self, *, value: Any, bound: Any, edge: Literal["start", "end", "bounds"]
    ):
        self.value: Any = value
        self.bound: Any = bound
        self.edge: Literal["start", "end", "bounds"] = edge
        if edge == "bounds":
            message = (
                f"Range start {value!r} ({type(value).__name__}) cannot be "
                f"ordered against end {bound!r} ({type(bound).__name__}).\n"
                f"Hint: Both bounds of a range must share one ordered type, e.g.\n"
                f"  in_range(start=10, end=20)"
            )
        else:
            message = (
                f"Cannot compare {type(value).__name__} {value!r} with the range "
                f"{edge} bound {bound!r} ({type(bound).__name__}).\n"
                f"Hint: A range compares values of a single ordered type.\n"
                f"      Test it with the same type as its bounds, e.g.\n"
                f"  in_range(start=10, end=20).test(15)"
            )
        super().__init__(message)
