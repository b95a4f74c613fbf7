from linkscout.domain.discovered_links import DiscoveredLinks


def test_add_keeps_insertion_order():
    links = DiscoveredLinks()
    for url in ["http://example.com/b", "http://example.com/a", "http://example.com/c"]:
        links.add(url)
    assert links.as_list() == ["http://example.com/b", "http://example.com/a", "http://example.com/c"]
    assert list(links) == links.as_list()


def test_add_rejects_duplicates():
    links = DiscoveredLinks()
    assert links.add("http://example.com/a") is True
    assert links.add("http://example.com/a") is False
    assert len(links) == 1


def test_get_and_index_of_follow_insertion_order():
    links = DiscoveredLinks()
    links.add("http://example.com/a")
    links.add("http://example.com/b")
    assert links.get(1) == "http://example.com/b"
    assert links.index_of("http://example.com/a") == 0


def test_membership():
    links = DiscoveredLinks()
    links.add("http://example.com/a")
    assert "http://example.com/a" in links
    assert "http://example.com/b" not in links


def test_as_list_returns_a_copy():
    links = DiscoveredLinks()
    links.add("http://example.com/a")
    snapshot = links.as_list()
    snapshot.append("http://example.com/x")
    assert len(links) == 1
