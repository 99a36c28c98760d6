import time

from bintree.indexing import BinaryTree

SAMPLE_PAIRS = [
    ("2", "goodbye"),
    ("1", "hello"),
    ("7", "cherry"),
    ("4", "doot"),
    ("9", "uber"),
]

def run_smoke_test():
    print("--- bintree smoke test ---")
    tree = BinaryTree()

    start_time = time.time()
    for key, value in SAMPLE_PAIRS:
        tree.put(key, value)
    end_time = time.time()

    print(f"Inserted {len(tree)} nodes in {end_time - start_time:.6f}s")

    for key, _ in SAMPLE_PAIRS:
        print(f"GET {key} -> {tree.get(key)}")

    removed = tree.remove("7")
    print(f"REMOVE 7 -> {removed}")
    print(f"GET 7 after remove -> {tree.get('7')}")

    removed_root = tree.remove("2")
    print(f"REMOVE 2 (root) -> {removed_root}")
    for key in ("1", "4", "9"):
        print(f"  - {key}: {tree.get(key)}")

    tree.clear()
    print(f"Cleared; empty={tree.is_empty()}")


if __name__ == "__main__":
    run_smoke_test()
