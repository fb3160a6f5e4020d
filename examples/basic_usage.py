"""Basic usage example using the convenience API."""

from __future__ import annotations

import calltracer


def fetch_profile(user_id: int) -> dict[str, object]:
    with calltracer.trace("$FN user_id=%d", user_id):
        return {"id": user_id, "name": "Ada"}


def render_greeting(profile: dict[str, object]) -> str:
    message = calltracer.enter()
    try:
        return f"Hello, {profile['name']}!"
    finally:
        calltracer.exit(message)


def main() -> None:
    calltracer.configure(spaces_per_indent=4)

    with calltracer.trace():
        profile = fetch_profile(7)
        print(render_greeting(profile))


if __name__ == "__main__":
    main()
