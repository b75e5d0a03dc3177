import logging
import os
import socket

from hr_browser.logging_config import configure_logging
from hr_browser.ui.dash_app import create_dash_app

configure_logging()
logger = logging.getLogger("hr_browser.app")

app = create_dash_app(os.getenv("HR_BROWSER_CONFIG_ROOT", "config"))
server = app.server


def find_free_port(start_port: int, attempts: int = 100) -> int:
    """First port from start_port on that nothing is listening on; start_port if all are taken."""
    for port in range(start_port, start_port + attempts):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex(("localhost", port)) != 0:
                return port
    return start_port


def main() -> None:
    preferred_port = int(os.getenv("PORT", "8050"))
    port = find_free_port(preferred_port)
    debug = os.getenv("DEBUG", "0") == "1"

    if port != preferred_port:
        logger.warning(
            "Preferred port taken; using the next free one",
            extra={"preferred_port": preferred_port, "port": port},
        )

    logger.info("Starting dashboard", extra={"port": port, "debug": debug})
    app.run(host="0.0.0.0", port=port, debug=debug)


if __name__ == "__main__":
    main()
