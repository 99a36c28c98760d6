import os
import time
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request

from bintree.indexing import BinaryTree

app = Flask(__name__)

tree = BinaryTree()

STATE: Dict[str, Any] = {"seeded": False, "seed_pairs": 0}

DEFAULT_HOST = os.environ.get("BINTREE_HOST", "127.0.0.1")
DEFAULT_PORT = int(os.environ.get("BINTREE_PORT", "5000"))
DEFAULT_DEBUG = os.environ.get("BINTREE_DEBUG", "0") == "1"
DEFAULT_SEED = os.environ.get("BINTREE_SEED", "")


def ok(data=None, **extra):
    payload = {"ok": True}
    if data is not None:
        payload["data"] = data
    payload.update(extra)
    return jsonify(payload)

def err(message: str, status: int = 400, **extra):
    payload = {"ok": False, "error": message}
    payload.update(extra)
    return jsonify(payload), status

def parse_seed(raw: str) -> List[Tuple[str, str]]:
    """Parse 'k1=v1,k2=v2' into (key, value) pairs; raises ValueError on a malformed item."""
    pairs: List[Tuple[str, str]] = []
    for item in (raw or "").split(","):
        item = item.strip()
        if not item:
            continue
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"seed item must be 'key=value': {item!r}")
        pairs.append((key.strip(), value.strip()))
    return pairs

def warm_start(seed: Optional[str] = None):
    """Load the optional seed pairs into the tree at startup."""
    raw = DEFAULT_SEED if seed is None else seed
    if not raw.strip():
        print("[warm_start] No seed provided.")
        return

    try:
        pairs = parse_seed(raw)
    except ValueError as e:
        print(f"[warm_start] Bad seed: {e}")
        return

    t0 = time.time()
    for key, value in pairs:
        tree.put(key, value)
    t1 = time.time()
    STATE["seeded"] = True
    STATE["seed_pairs"] = len(pairs)
    print(f"[warm_start] Seeded {len(pairs):,} pairs in {t1 - t0:.4f}s ({len(tree):,} nodes)")


@app.get("/api/status")
def api_status():
    return ok({
        "empty": tree.is_empty(),
        "size": len(tree),
        "seeded": STATE["seeded"],
        "seed_pairs": STATE["seed_pairs"],
    })


@app.get("/api/tree/<key>")
def api_tree_get(key: str):
    value = tree.get(key)
    if value is None:
        return err("key not found", 404)
    return ok({"key": key, "value": value})

@app.post("/api/tree/<key>")
def api_tree_put(key: str):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    if "value" not in data or data["value"] is None:
        return err("JSON body with a non-null 'value' required")

    tree.put(key, data["value"])
    return ok({"key": key, "value": data["value"], "size": len(tree)})

@app.post("/api/tree/<key>/delete")
def api_tree_delete(key: str):
    removed = tree.remove(key)
    if removed is None:
        return err("key not found", 404)
    return ok({"key": key, "removed": removed})


@app.post("/api/clear")
def api_clear():
    tree.clear()
    return ok({"cleared": True, "empty": tree.is_empty()})

@app.post("/api/seed")
def api_seed():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    pairs = data.get("pairs")
    if not isinstance(pairs, list):
        return err("JSON body with a 'pairs' list required")

    bad = [p for p in pairs if not (isinstance(p, list) and len(p) == 2 and isinstance(p[0], str) and p[1] is not None)]
    if bad:
        return err(f"pairs must be [string key, non-null value]: {bad[:3]}")

    for key, value in pairs:
        tree.put(key, value)
    return ok({"inserted": len(pairs), "size": len(tree)})


if __name__ == "__main__":
    warm_start()
    app.run(host=DEFAULT_HOST, port=DEFAULT_PORT, debug=DEFAULT_DEBUG, use_reloader=False)
