from __future__ import annotations

import uvicorn

from property_site.core.config import settings


def main() -> None:
    uvicorn.run("property_site.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
