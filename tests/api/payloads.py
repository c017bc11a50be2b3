"""Request bodies shared by API tests."""

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


def translations(name: str, description: str = "") -> list[dict[str, str]]:
    """Build translations in every supported language from one base name."""
    return [
        {"language_code": "ru", "name": f"{name} RU", "description": description},
        {"language_code": "kgz", "name": f"{name} KGZ", "description": description},
        {"language_code": "en", "name": name, "description": description},
    ]


def photo_form(
    photos: list[tuple[str, bool, str]],
) -> tuple[list[tuple[str, tuple[str, bytes, str]]], dict[str, str]]:
    """Build multipart files and option fields.

    Args:
        photos: (filename, is_main, hash_color) per photo.

    Returns:
        Files for httpx and the ``is_main_*``/``hash_color_*`` fields.
    """
    files = []
    fields: dict[str, str] = {}
    for filename, is_main, hash_color in photos:
        files.append(("photos", (filename, PNG_BYTES, "image/png")))
        fields[f"is_main_{filename}"] = "true" if is_main else "false"
        if hash_color:
            fields[f"hash_color_{filename}"] = hash_color
    return files, fields
