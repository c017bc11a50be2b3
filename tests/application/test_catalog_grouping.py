"""Tests for folding flat catalog rows into a detail."""

from plumbing.application.catalog_service import group_detail_rows


def row(language_code: str, name: str, color_id: int | None, hash_color: str | None = None) -> dict:
    return {
        "id": 1,
        "price": 1200.0,
        "language_code": language_code,
        "name": name,
        "description": "",
        "color_id": color_id,
        "color_name": "Color" if color_id else None,
        "hash_color": hash_color,
    }


class TestGroupDetailRows:
    """Tests for group_detail_rows."""

    def test_no_rows(self) -> None:
        """No rows means no catalog."""
        assert group_detail_rows([]) is None

    def test_groups_colors_per_language(self) -> None:
        """Each language collects its colors in row order."""
        detail = group_detail_rows(
            [
                row("ru", "Смеситель", 1, "#FFFFFF"),
                row("ru", "Смеситель", 2, "#000000"),
                row("en", "Mixer", 1, "#FFFFFF"),
                row("en", "Mixer", 2, "#000000"),
            ]
        )

        assert detail.id == 1
        assert detail.price == 1200.0
        assert [entry.language_code for entry in detail.languages] == ["ru", "en"]
        assert [c.hash_color for c in detail.languages[1].colors] == ["#FFFFFF", "#000000"]

    def test_language_without_colors(self) -> None:
        """Outer-joined rows without a color give an empty color list."""
        detail = group_detail_rows([row("kgz", "Аралаштыргыч", None)])

        assert len(detail.languages) == 1
        assert detail.languages[0].colors == []

    def test_repeated_color_listed_once(self) -> None:
        """Duplicate rows do not duplicate colors."""
        detail = group_detail_rows([row("ru", "Смеситель", 1, "#FFF"), row("ru", "Смеситель", 1, "#FFF")])

        assert len(detail.languages[0].colors) == 1
