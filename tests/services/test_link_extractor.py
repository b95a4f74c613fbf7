import logging

from linkscout.services.link_extractor import LinkExtractor


def test_extract_links_in_document_order():
    html = '<html><body><a href="/b">B</a><p><a href="/a">A</a></p><a href="http://other.com/x">X</a></body></html>'
    assert LinkExtractor().extract(html) == ["/b", "/a", "http://other.com/x"]


def test_nofollow_links_are_skipped():
    html = '<a href="/a">a</a><a href="/c" rel="nofollow">c</a>'
    assert LinkExtractor().extract(html) == ["/a"]


def test_only_exact_nofollow_is_skipped():
    html = (
        '<a href="/one" rel="nofollow noopener">1</a>'
        '<a href="/two" rel="noopener">2</a>'
        '<a href="/three" rel="">3</a>'
    )
    assert LinkExtractor().extract(html) == ["/one", "/two", "/three"]


def test_anchors_without_href_are_ignored():
    html = '<a name="top">top</a><a href="/a">a</a>'
    assert LinkExtractor().extract(html) == ["/a"]


def test_values_are_not_trimmed_or_resolved():
    html = '<a href=" /a?x=1#frag ">a</a><a href="mailto:foo@bar.com">mail</a>'
    assert LinkExtractor().extract(html) == [" /a?x=1#frag ", "mailto:foo@bar.com"]


def test_malformed_html_is_tolerated():
    html = '<div><a href="/a">a<a href="/b">b</div></span><a href="/c"'
    links = LinkExtractor().extract(html)
    assert links[:2] == ["/a", "/b"]


def test_empty_body_yields_no_links():
    assert LinkExtractor().extract("") == []
    assert LinkExtractor().extract(None) == []


def test_bytes_body_is_accepted():
    assert LinkExtractor().extract(b'<a href="/a">a</a>') == ["/a"]


def test_parser_failure_is_logged_and_yields_no_links(caplog):
    def broken_factory(html):
        raise ValueError("cannot parse")

    caplog.set_level(logging.ERROR)
    assert LinkExtractor(soup_factory=broken_factory).extract("<a href='/a'>") == []
    assert "Error extracting links" in caplog.text


def test_rel_is_compared_as_the_raw_attribute():
    html = (
        '<a href="/x" rel=" nofollow">x</a>'
        '<a href="/y" rel="nofollow ">y</a>'
        '<a href="/z" rel="nofollow">z</a>'
    )
    assert LinkExtractor().extract(html) == ["/x", "/y"]
