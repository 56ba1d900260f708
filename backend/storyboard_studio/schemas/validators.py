def reject_explicit_null(value):
    """Field validator for patch models: a required column may be omitted but not nulled.

    Pydantic skips validators for defaults, so this only fires when the
    caller actually sent ``null``.
    """
    if value is None:
        raise ValueError("field cannot be null")
    return value
