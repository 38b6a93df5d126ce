"""Test data builders."""

import json

import httpx


def code_hit(n, **overrides):
    """A code search hit addressing a real file revision."""
    hit = {
        "fileName": f"file{n}.py",
        "path": f"/src/file{n}.py",
        "project": {"id": f"proj-{n}", "name": "Fabrikam"},
        "repository": {"id": f"repo-{n}", "name": "fabrikam-api"},
        "versions": [{"branchName": "main", "changeId": f"c{n}"}],
    }
    hit.update(overrides)
    return hit


def git_item(path, content="print('hello')"):
    return {"objectId": "abc123", "path": path, "content": content}


def json_response(payload, status_code=200):
    return httpx.Response(status_code, content=json.dumps(payload).encode())
