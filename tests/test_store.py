import threading

from crowboard.models import Post, User
from crowboard.store import Store, seeded_store


def test_empty_store():
    store = Store()
    assert store.users == {}
    assert store.posts == {}
    assert store.user_id_count == 0
    assert store.post_id_count == 0


def test_next_post_id_counts_up():
    store = Store()
    first = store.next_post_id()
    second = store.next_post_id()
    assert second == first + 1
    assert store.post_id_count == second


def test_seeded_users():
    store = seeded_store()
    assert store.users[1] == User(1, "Alice Smith")
    assert store.users[2] == User(2, "Bob Johnson")
    assert store.users[3] == User(3, "Charlie Brown")
    assert store.user_id_count == 3


def test_seeded_posts():
    store = seeded_store()
    assert sorted(store.posts) == [101, 102, 103]
    assert store.posts[103] == Post(103, "Modules", "C++20 Modules", 1)
    assert store.post_id_count == 103


def test_seeded_next_id_follows_seed():
    store = seeded_store()
    assert store.next_post_id() == store.post_id_count
    assert store.post_id_count > max(store.posts)


def test_seeded_stores_are_independent():
    a = seeded_store()
    b = seeded_store()
    del a.users[1]
    assert 1 in b.users


def test_next_post_id_is_unique_across_threads():
    store = Store()
    results = []
    collect = threading.Lock()

    def worker():
        for _ in range(200):
            value = store.next_post_id()
            with collect:
                results.append(value)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(set(results)) == len(results)
    assert store.post_id_count == len(results)