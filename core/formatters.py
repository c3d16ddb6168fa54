# core/formatters.py

# all pure text utilities
# must never import from models!

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_divider(width: int = 40) -> str:
    return "-" * width


# === score formatters ===


def format_score(score: float) -> str:
    """
    Renders a score the same way it is written to the roster file.

    Uses the shortest decimal text that parses back to the same float, so `85.0` stays `85.0` and `72.25` stays `72.25`.
    """
    return repr(float(score))
