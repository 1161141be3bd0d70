def format_clock(seconds: int) -> str:
    """Format whole seconds as zero-padded ``MM:SS``."""
    seconds = max(0, int(seconds))
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"
