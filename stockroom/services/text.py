def capitalize(text):
    """Upper-case the first character only ("t-shirt" -> "T-shirt")."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def normalize_text_fields(data: dict, fields=("name", "description")) -> dict:
    """Trim and capitalize the given free-text fields."""
    clean = dict(data)
    for field in fields:
        if clean.get(field):
            clean[field] = capitalize(clean[field].strip())
    return clean
