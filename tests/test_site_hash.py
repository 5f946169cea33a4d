import hashlib

from solrsite.core.utils.site_hash import get_site_hash_for_domain


def test_hash_concatenates_domain_key_and_namespace():
    expected = hashlib.sha1(b"www.example.orgkeytx_solr").hexdigest()

    assert get_site_hash_for_domain("www.example.org", "key") == expected


def test_hash_depends_on_each_input():
    base = get_site_hash_for_domain("a.org", "key")

    assert get_site_hash_for_domain("a.org", "key") == base
    assert get_site_hash_for_domain("b.org", "key") != base
    assert get_site_hash_for_domain("a.org", "other") != base
    assert get_site_hash_for_domain("a.org", "key", "custom") != base
