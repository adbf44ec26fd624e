"""Example: run the console auth gate without Flask.

The gate decision is a plain function of the Authorization header, so it can
be exercised straight from the container.
"""

import base64

from hiki_attendance.container import build_container
from hiki_attendance.settings import load_settings


def main():
    container = build_container(settings=load_settings())
    gate = container.console_gate

    good = "Basic " + base64.b64encode(b"admin:admin123").decode("ascii")
    for header in (None, "Bearer xyz", good, "Basic %%%notbase64%%%"):
        decision = gate.evaluate(header)
        print(f"{header!r:40} -> {decision.outcome.value} {decision.message or ''}")


if __name__ == "__main__":
    main()
