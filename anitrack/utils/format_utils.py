def format_duration(seconds: float) -> str:
    """Format seconds as H:MM:SS, or M:SS under an hour. Fractions are truncated."""
    s = int(seconds)
    hours = s // 3600
    minutes = (s % 3600) // 60
    seconds = s % 60
    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"
