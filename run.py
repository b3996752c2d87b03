"""Project root entry point for launching the web interface."""

from __future__ import annotations


def main():
    from pseudolocalizer.web import create_app

    app = create_app()
    app.run(host="127.0.0.1", port=5500, debug=True)


if __name__ == "__main__":
    main()
