VOCABULARY_MARKER = "schema.org/"

ROOT_TYPE = "Thing"


def resolve_type(declared_type: str) -> str:
    """
    Canonical local name of a declared type.

    ``https://schema.org/Product`` -> ``Product``
    ``http://schema.org/Event http://schema.org/Thing`` -> ``Event``
    ``http://example.com/vocab/Widget`` -> ``Widget``
    """
    declared = str(declared_type).strip()

    if VOCABULARY_MARKER in declared:
        resolved = declared.split(VOCABULARY_MARKER, 1)[1].split(" ")[0]
        # bare vocabulary IRI names the root type
        return resolved or ROOT_TYPE

    resolved = declared.split("/")[-1]

    return resolved or declared
