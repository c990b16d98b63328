"""
Run the PhotoShare web server: `python -m photoshare`.
"""

import uvicorn

from photoshare.config import settings


def main() -> None:
    uvicorn.run(
        "photoshare.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
