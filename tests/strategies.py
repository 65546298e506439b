"""Hypothesis strategies for generating JSON documents.

Provides custom strategies for property-based testing of the scanner:
well-formed documents rendered by the standard library encoder, raw
grammar-alphabet noise, and deeply nested bracket runs.
"""

from __future__ import annotations

import json

from hypothesis import strategies as st
from hypothesis.strategies import composite

# Bytes that appear in JSON syntax. Restricted to lowercase letters plus "E"
# so the stdlib decoder's NaN/Infinity extensions can never be spelled.
GRAMMAR_ALPHABET = '{}[]:,"\\/ \t\n\r-+.0123456789eEtrufalsnbu'

json_scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(10**20), max_value=10**20),
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(max_size=20),
)

json_values = st.recursive(
    json_scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=5),
        st.dictionaries(st.text(max_size=10), children, max_size=5),
    ),
    max_leaves=25,
)

json_containers = st.one_of(
    st.lists(json_values, max_size=5),
    st.dictionaries(st.text(max_size=10), json_values, max_size=5),
)


@composite
def json_documents(draw: st.DrawFn) -> bytes:
    """Generate well-formed documents with an object or array at the top.

    Layout varies between compact, spaced and indented output, and strings
    are emitted either ASCII-escaped or as raw UTF-8.
    """
    value = draw(json_containers)
    layout = draw(st.sampled_from(["compact", "spaced", "indented"]))
    ensure_ascii = draw(st.booleans())
    if layout == "compact":
        text = json.dumps(value, separators=(",", ":"), ensure_ascii=ensure_ascii)
    elif layout == "spaced":
        text = json.dumps(value, ensure_ascii=ensure_ascii)
    else:
        text = json.dumps(value, indent=draw(st.integers(0, 4)), ensure_ascii=ensure_ascii)
    return text.encode("utf-8")


@composite
def space_only_documents(draw: st.DrawFn) -> bytes:
    """Generate documents whose only inter-token whitespace is U+0020."""
    value = draw(json_containers)
    return json.dumps(value, separators=(", ", ": ")).encode("ascii")


@composite
def grammar_noise(draw: st.DrawFn, max_size: int = 60) -> bytes:
    """Generate ASCII text drawn only from bytes that occur in JSON syntax."""
    text = draw(st.text(alphabet=GRAMMAR_ALPHABET, max_size=max_size))
    return text.encode("ascii")


@composite
def mutated_documents(draw: st.DrawFn) -> bytes:
    """Take a valid ASCII document and delete, duplicate or replace one byte."""
    value = draw(json_containers)
    data = bytearray(json.dumps(value, separators=(",", ":")).encode("ascii"))
    index = draw(st.integers(0, len(data) - 1))
    action = draw(st.sampled_from(["delete", "duplicate", "replace"]))
    if action == "delete":
        del data[index]
    elif action == "duplicate":
        data.insert(index, data[index])
    else:
        data[index] = ord(draw(st.sampled_from(GRAMMAR_ALPHABET)))
    return bytes(data)
