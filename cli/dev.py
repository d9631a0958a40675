import os


def main() -> None:
    """Run development server.

    Host, port and workers come from SERVER_* settings. APP_ENV defaults to
    local so the server reloads on code changes.
    """
    os.environ.setdefault("APP_ENV", "local")

    from card_gateway.main import run

    run()
