import pytest


@pytest.fixture(scope="session")
def crontab_text() -> str:
    return (
        "# m h dom mon dow command\n"
        "SHELL=/bin/sh\n"
        "MAILTO = ops@example.org\n"
        "\n"
        "   # indented comment\n"
        "*/15 * * * * /usr/bin/check --quiet\n"
        "@daily    /usr/local/bin/backup  home  \n"
        "0 9 * * MON echo 'Weekly Report'"
    )
