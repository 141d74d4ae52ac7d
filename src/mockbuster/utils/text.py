"""Text parsing utilities for values read from PostgreSQL."""


def parse_special_features(raw: str | list[str] | None) -> list[str]:
    """
    Parse a film's special features into a list.

    PostgreSQL renders ``text[]`` as a set-like literal such as
    ``{Trailers,"Deleted Scenes"}``: braces are trimmed, elements are split
    on commas and any surrounding double quotes removed.

    Examples:
        "{Trailers,Commentaries}" → ["Trailers", "Commentaries"]
        "{}" → []
        None → []

    Args:
        raw: Array literal, an already decoded list, or None

    Returns:
        List of feature names (empty when there are none)
    """
    if raw is None:
        return []
    if isinstance(raw, list):
        return list(raw)

    features = raw.strip().strip("{}")
    if not features:
        return []
    return [feature.strip('"') for feature in features.split(",")]
