# https://www.w3.org/TR/png-3/#3PNGsignature
PNG_SIGNATURE = b"\x89\x50\x4E\x47\x0D\x0A\x1A\x0A"  # "HTJ P N G CR LF SUB LF"


def drop_png_signature(data: bytes | bytearray | memoryview) -> memoryview | None:
    """Returns a view of everything after the signature, or None if there is no signature."""
    # Count bytes, not items, whatever the format of the given buffer
    view = memoryview(data).cast("B")
    if len(view) < len(PNG_SIGNATURE):
        return None
    if view[: len(PNG_SIGNATURE)] != PNG_SIGNATURE:
        return None
    return view[len(PNG_SIGNATURE) :]
