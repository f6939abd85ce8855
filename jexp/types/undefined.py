from __future__ import annotations


class UndefinedType:
    """The absent value: unsupplied parameters, missing keys, unmatched cond."""

    _instance: UndefinedType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "undefined"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, UndefinedType)

    def __hash__(self):
        return hash(UndefinedType)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


Undefined = UndefinedType()
