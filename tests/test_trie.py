from vocabtrie.trie import Node


def test_lookup_on_empty_node():
    root = Node()
    assert root.lookup("a") is None
    assert root.lookup("") is None


def test_insert_and_lookup():
    root = Node()
    root.insert("cat", 3)
    assert root.lookup("cat") == 3
    assert root.lookup("ca") is None
    assert root.lookup("cats") is None
    assert root.lookup("dog") is None


def test_position_zero_is_not_absent():
    root = Node()
    root.insert("a", 0)
    assert root.lookup("a") == 0


def test_empty_suffix_stored_on_node_itself():
    root = Node()
    root.insert("", 7)
    assert root.position == 7
    assert root.children == {}
    assert root.lookup("") == 7


def test_reinsert_overwrites():
    root = Node()
    root.insert("cat", 1)
    root.insert("cat", 5)
    assert root.lookup("cat") == 5


def test_shared_prefix_keeps_siblings():
    root = Node()
    root.insert("car", 0)
    root.insert("cat", 1)
    assert set(root.children["c"].children["a"].children) == {"r", "t"}
    assert root.lookup("car") == 0
    assert root.lookup("cat") == 1


def test_lookup_does_not_allocate():
    root = Node()
    root.insert("ab", 0)
    root.lookup("abc")
    root.lookup("xyz")
    assert set(root.children) == {"a"}
    assert root.children["a"].children["b"].children == {}


def test_non_ascii_characters():
    root = Node()
    root.insert("eĥoŝanĝo", 2)
    root.insert("日本語", 4)
    assert root.lookup("eĥoŝanĝo") == 2
    assert root.lookup("日本語") == 4
    assert root.lookup("eĥo") is None


def test_long_word_does_not_hit_recursion_limit():
    word = "a" * 5_000
    root = Node()
    root.insert(word, 1)
    assert root.lookup(word) == 1
    assert root.lookup(word[:-1]) is None
