import uvicorn

from docbrowser.config.settings import settings


def main(argv: list[str] | None = None) -> int:
    # Run FastAPI app from docbrowser.main:app
    uvicorn.run(
        "docbrowser.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )  # type: ignore[arg-type]
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
