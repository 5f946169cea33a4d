import hashlib


def get_site_hash_for_domain(domain: str, encryption_key: str, namespace: str = "tx_solr") -> str:
    """Return the site hash for a domain.

    The hash is the sha1 hex digest of the domain, the installation's
    encryption key and a fixed namespace, concatenated in that order.
    """
    return hashlib.sha1(f"{domain}{encryption_key}{namespace}".encode("utf-8")).hexdigest()
