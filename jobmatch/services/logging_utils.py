from typing import Callable, Optional


def print_with_prefix(prefix: str, message: Optional[str], enabled: bool = True) -> None:
    if not enabled:
        return
    text = "" if message is None else str(message)
    for line in text.splitlines() or [""]:
        print(f"{prefix} {line}" if line else prefix)


def prefixed_logger(prefix: str, enabled: bool = True) -> Callable[[str], None]:
    """Ritorna una funzione di log con prefisso fisso (es. "[RankingOrchestrator]")."""
    def _log(message: str) -> None:
        print_with_prefix(prefix, message, enabled=enabled)
    return _log


def log_section(
    log_fn: Callable[[str], None],
    title: str,
    width: int = 70,
    char: str = "=",
) -> None:
    line = char * width
    log_fn(line)
    log_fn(title)
    log_fn(line)
