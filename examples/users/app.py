"""User lookup — a small service built on the wren router.

Demonstrates registration, ``:param`` capture, typed context access,
raising HTTP errors from handlers, and building the server from a
JSON config file.

Run:
    python app.py
"""

import logging

from wren import HTTPMethod, NotFound, Request, RequestContext, Router, load_config

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

USERS: dict[str, dict[str, str]] = {
    "u-1": {"id": "u-1", "name": "Ada"},
    "u-2": {"id": "u-2", "name": "Grace"},
}

router = Router(load_config())


@router.get("/users")
def list_users():
    return list(USERS.values())


@router.get("/users/:id")
def get_user(id: str):
    user = USERS.get(id)
    if user is None:
        raise NotFound(f"no user {id}")
    return user


@router.post("/users")
async def create_user(request: Request):
    payload = await request.json()
    user_id = f"u-{len(USERS) + 1}"
    USERS[user_id] = {"id": user_id, "name": payload["name"]}
    return USERS[user_id], 201


def whoami(context: RequestContext):
    return {"route": context.route.path, "params": dict(context.params), "trace": context.trace_id}


router.add_route(HTTPMethod.GET, "/users/:id/whoami", whoami)


if __name__ == "__main__":
    router.run()
