from __future__ import annotations

from prettylog import Level, LogEvent, PrettyPrinter

TRACE = """\
#0      Repo.fetch (package:myapp/repo.py:31)
#1      Session.execute (package:sqlalchemy/orm/session.py:2245)
#2      Pool.connect (package:sqlalchemy/pool/base.py:310)
#3      Handler.get (package:myapp/api/handlers.py:57)
#4      run (python:asyncio/runners.py:44)"""


def main() -> None:
    printer = PrettyPrinter(name="api", colors=False)
    printer.ignore_package("sqlalchemy", Level.ERROR)

    for level in (Level.WARNING, Level.ERROR):
        for line in printer.log(LogEvent(level, "query failed", error="timeout", stack_trace=TRACE)):
            print(line)

    # A copy for a sub-component shares settings but not later ignore-list edits.
    child = printer.copy(with_name="api.auth")
    child.ignore_package("myapp/api")
    print(printer.ignored_packages, child.ignored_packages)


if __name__ == "__main__":
    main()
