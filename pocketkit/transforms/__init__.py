"""
Pure transforms over lists, dicts and strings.

No function here mutates its input except objects.clear_none, which is
documented as in-place.
"""
