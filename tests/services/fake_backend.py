"""Fake Backend: FastAPI app implementing the CRUD endpoints behind the envelope.

Invariants:
    - Rows live in memory per resource; IDs are assigned sequentially
    - Every response is an envelope: {"code": 0, "data": ...}
    - Resource "broken" answers list: null; resource "expired" answers code 555
    - Every received call is appended to app.state.calls

Design Decisions:
    - Served through httpx.ASGITransport: the client talks real HTTP semantics
      without a socket
"""

import json
from typing import Any

from fastapi import FastAPI, Request


def _matches(row: dict, cond: dict) -> bool:
    return all(row.get(k) == v for k, v in cond.items())


def create_backend(seed: dict[str, list[dict]] | None = None) -> FastAPI:
    app = FastAPI()
    app.state.rows = {name: [dict(r) for r in rows] for name, rows in (seed or {}).items()}
    app.state.calls = []
    app.state.next_id = 1 + max(
        (r.get("ID", 0) for rows in app.state.rows.values() for r in rows), default=0,
    )

    def table(name: str) -> list[dict]:
        return app.state.rows.setdefault(name, [])

    def ok(data: Any) -> dict:
        return {"code": 0, "data": data}

    @app.get("/api/{name}")
    async def list_rows(name: str, request: Request):
        params = dict(request.query_params)
        app.state.calls.append(("GET", name, params))
        if name == "broken":
            return ok({"list": None, "totalrecords": 0})
        if name == "expired":
            return {"code": 555, "msg": "session expired"}
        cond = json.loads(params.get("cond") or "{}")
        rows = [r for r in table(name) if _matches(r, cond)]
        sort = params.get("sort")
        if sort:
            key = sort.lstrip("-")
            rows.sort(key=lambda r: r.get(key, ""), reverse=sort.startswith("-"))
        if "size" in params:
            page = int(params.get("page", 1))
            size = int(params["size"])
            rows = rows[(page - 1) * size:page * size]
        return ok({"list": rows, "totalrecords": len(rows)})

    @app.post("/api/{name}")
    async def create_rows(name: str, request: Request):
        body = await request.json()
        app.state.calls.append(("POST", name, body))
        created = []
        for doc in body:
            row = {"ID": app.state.next_id, **doc}
            app.state.next_id += 1
            table(name).append(row)
            created.append(row)
        return ok(created)

    @app.put("/api/{name}")
    async def update_rows(name: str, request: Request):
        body = await request.json()
        app.state.calls.append(("PUT", name, body))
        matched = [r for r in table(name) if _matches(r, body["cond"])]
        if not body.get("multi"):
            matched = matched[:1]
        for row in matched:
            row.update(body["doc"])
        return ok({"count": len(matched)})

    @app.delete("/api/{name}")
    async def delete_rows(name: str, request: Request):
        body = await request.json()
        app.state.calls.append(("DELETE", name, body))
        matched = [r for r in table(name) if _matches(r, body["cond"])]
        if not body.get("multi"):
            matched = matched[:1]
        for row in matched:
            table(name).remove(row)
        return ok({"count": len(matched)})

    return app
