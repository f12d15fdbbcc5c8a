def to_lower_camel(token: str) -> str:
    """Convert an underscore-delimited token to lowerCamelCase.

    ``lg_dash_dot`` becomes ``lgDashDot``; a token without underscores is
    returned lower-cased on its first letter only (``solid`` stays ``solid``).
    Empty segments from doubled or trailing underscores are dropped.
    """
    parts = [p for p in str(token).split("_") if p]
    if not parts:
        return ""
    head, tail = parts[0], parts[1:]
    return head[:1].lower() + head[1:] + "".join(p[:1].upper() + p[1:] for p in tail)
