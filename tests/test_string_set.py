from algokit.string_set import StringSet

PAIRS = [
    ("polaris", " 中文 "),
    ("studyguide", "语言中文网 "),
    ("stdlib", "语言标准库 "),
    ("polaris1", " 中文 1"),
    ("studyguide1", "语言中文网 1"),
    ("stdlib1", "语言标准库 1"),
    ("polaris2", " 中文 2"),
    ("studyguide2", "语言中文网 2"),
    ("stdlib2", "语言标准库 2"),
    ("polaris3", " 中文 3"),
    ("studyguide3", "语言中文网 3"),
    ("stdlib3", "语言标准库 3"),
    ("polaris4", " 中文 4"),
    ("studyguide4", "语言中文网 4"),
    ("stdlib4", "语言标准库 4"),
]


def test_written_keys_are_found():
    keys = StringSet()
    for key, _ in PAIRS:
        keys.add(key)
    for key, value in PAIRS:
        assert key in keys
        assert value not in keys
    assert len(keys) == len(PAIRS)


def test_has():
    keys = StringSet()
    keys.add("Tom")
    keys.add("Sam")
    assert "Tom" in keys
    assert "Jack" not in keys
    assert sorted(keys) == ["Sam", "Tom"]


def test_add_twice_keeps_one():
    keys = StringSet()
    keys.add("Tom")
    keys.add("Tom")
    assert list(keys) == ["Tom"]


def test_discard():
    keys = StringSet(["Tom", "Sam"])
    keys.discard("Tom")
    keys.discard("Jack")
    assert "Tom" not in keys
    assert list(keys) == ["Sam"]