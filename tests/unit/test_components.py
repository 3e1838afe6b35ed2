"""tests/unit/test_components.py

Unit tests for urikit.uri.components module.

Test Coverage:
    - Empty store creation
    - set/get fidelity for every component kind
    - remove() ownership transfer
    - Pull-based cache: set/remove never rebuild
    - Key and value type handling
"""

import pytest

from urikit.uri.components import ComponentKind, ComponentStore, create

# ============================================================================
# TEST CLASS: Creation
# ============================================================================


class TestCreate:
    """Tests for create() and ComponentStore.__init__()."""

    def test_create_all_slots_absent(self) -> None:
        """Test that a new store has every slot absent."""
        store = create()

        assert isinstance(store, ComponentStore)
        for kind in ComponentKind:
            assert store.get(kind) is None
        assert store.cached_build is None

    def test_kind_order_is_canonical(self) -> None:
        """Test that ComponentKind iterates in serialization order."""
        assert [kind.value for kind in ComponentKind] == [
            "scheme",
            "userinfo",
            "host",
            "port",
            "path",
            "query",
            "fragment",
        ]


# ============================================================================
# TEST CLASS: set() / get()
# ============================================================================


class TestSetGet:
    """Tests for ComponentStore.set() and ComponentStore.get()."""

    @pytest.mark.parametrize("kind", list(ComponentKind))
    @pytest.mark.parametrize("value", ["", "value", "with spaces & symbols?#"])
    def test_get_returns_set_value(
        self, empty_store: ComponentStore, kind: ComponentKind, value: str
    ) -> None:
        """Test that get() returns what set() stored, including empty text."""
        empty_store.set(kind, value)

        assert empty_store.get(kind) == value

    def test_set_replaces_previous_value(self, empty_store: ComponentStore) -> None:
        """Test that set() overwrites an existing value."""
        empty_store.set(ComponentKind.HOST, "a")
        empty_store.set(ComponentKind.HOST, "b")

        assert empty_store.get(ComponentKind.HOST) == "b"

    def test_set_none_clears_slot(self, empty_store: ComponentStore) -> None:
        """Test that set(kind, None) makes the slot absent."""
        empty_store.set(ComponentKind.PORT, "80")
        empty_store.set(ComponentKind.PORT, None)

        assert empty_store.get(ComponentKind.PORT) is None

    def test_set_does_not_touch_other_slots(self, full_store: ComponentStore) -> None:
        """Test that set() only changes the addressed slot."""
        full_store.set(ComponentKind.PATH, "/other")

        assert full_store.get(ComponentKind.HOST) == "host"
        assert full_store.get(ComponentKind.QUERY) == "q"

    def test_values_are_copied_to_plain_str(self, empty_store: ComponentStore) -> None:
        """Test that str subclasses are copied in and out as plain str."""

        class Tagged(str):
            pass

        value = Tagged("/tagged")
        empty_store.set(ComponentKind.PATH, value)
        result = empty_store.get(ComponentKind.PATH)

        assert result == "/tagged"
        assert type(result) is str
        assert result is not value

    def test_caller_rebinding_does_not_affect_store(
        self, empty_store: ComponentStore
    ) -> None:
        """Test that changing the caller's variable leaves the store intact."""
        buffer = "first"
        empty_store.set(ComponentKind.QUERY, buffer)
        buffer += "-changed"

        returned = empty_store.get(ComponentKind.QUERY)
        returned += "-again"

        assert empty_store.get(ComponentKind.QUERY) == "first"

    def test_accepts_component_name(self, empty_store: ComponentStore) -> None:
        """Test that kinds can be given by their lowercase name."""
        empty_store.set("fragment", "top")

        assert empty_store.get("fragment") == "top"
        assert empty_store.get(ComponentKind.FRAGMENT) == "top"

    @pytest.mark.parametrize("key", ["build", "PATH", "authority", ""])
    def test_unknown_key_raises_keyerror(
        self, empty_store: ComponentStore, key: str
    ) -> None:
        """Test that unknown keys, including the cache slot, are rejected."""
        with pytest.raises(KeyError):
            empty_store.get(key)
        with pytest.raises(KeyError):
            empty_store.set(key, "x")

    @pytest.mark.parametrize("value", [b"bytes", 80, ["list"]])
    def test_non_str_value_raises_typeerror(
        self, empty_store: ComponentStore, value: object
    ) -> None:
        """Test that set() rejects values that are not str or None."""
        with pytest.raises(TypeError):
            empty_store.set(ComponentKind.PORT, value)  # type: ignore[arg-type]


# ============================================================================
# TEST CLASS: remove()
# ============================================================================


class TestRemove:
    """Tests for ComponentStore.remove()."""

    def test_remove_returns_value_and_clears(self, full_store: ComponentStore) -> None:
        """Test that remove() hands back the value and leaves the slot absent."""
        removed = full_store.remove(ComponentKind.USERINFO)

        assert removed == "user"
        assert full_store.get(ComponentKind.USERINFO) is None

    def test_remove_twice_returns_none(self, full_store: ComponentStore) -> None:
        """Test that a second remove() of the same slot returns None."""
        full_store.remove(ComponentKind.PORT)

        assert full_store.remove(ComponentKind.PORT) is None

    def test_remove_absent_slot(self, empty_store: ComponentStore) -> None:
        """Test that removing an absent slot returns None."""
        assert empty_store.remove(ComponentKind.QUERY) is None


# ============================================================================
# TEST CLASS: Cache behavior
# ============================================================================


class TestCachedBuild:
    """Tests for the pull-based cached build."""

    def test_set_does_not_rebuild(self, full_store: ComponentStore) -> None:
        """Test that set() leaves the cached build stale."""
        before = full_store.cached_build
        full_store.set(ComponentKind.PATH, "/changed")

        assert full_store.cached_build == before

    def test_remove_does_not_rebuild(self, full_store: ComponentStore) -> None:
        """Test that remove() leaves the cached build stale."""
        full_store.remove(ComponentKind.FRAGMENT)

        assert full_store.cached_build == "http://user@host:80/path?q#f"

    def test_canonical_string_refreshes_cache(
        self, full_store: ComponentStore
    ) -> None:
        """Test that canonical_string() rebuilds and updates the cache."""
        full_store.set(ComponentKind.PATH, "/changed")

        result = full_store.canonical_string()

        assert result == "http://user@host:80/changed?q#f"
        assert full_store.cached_build == result

    def test_canonical_string_idempotent(self, full_store: ComponentStore) -> None:
        """Test that consecutive rebuilds give the same result."""
        assert full_store.canonical_string() == full_store.canonical_string()

    def test_cached_build_is_read_only(self, full_store: ComponentStore) -> None:
        """Test that the cache cannot be assigned directly."""
        with pytest.raises(AttributeError):
            full_store.cached_build = "x"  # type: ignore[misc]


# ============================================================================
# TEST CLASS: Helpers
# ============================================================================


class TestHelpers:
    """Tests for elements(), copy() and __repr__()."""

    def test_elements(self, full_store: ComponentStore) -> None:
        """Test that elements() lists every semantic slot in order."""
        assert full_store.elements() == {
            "scheme": "http",
            "userinfo": "user",
            "host": "host",
            "port": "80",
            "path": "/path",
            "query": "q",
            "fragment": "f",
        }

    def test_copy_is_independent(self, full_store: ComponentStore) -> None:
        """Test that copy() duplicates slots and cache without sharing state."""
        clone = full_store.copy()
        clone.set(ComponentKind.PATH, "/2")

        assert clone.cached_build == full_store.cached_build
        assert full_store.get(ComponentKind.PATH) == "/path"
        assert clone.canonical_string() == "http://user@host:80/2?q#f"
        assert full_store.cached_build == "http://user@host:80/path?q#f"

    def test_sequential_uris_from_template(self, empty_store: ComponentStore) -> None:
        """Test building a sequence of URIs by varying one component."""
        empty_store.set(ComponentKind.SCHEME, "https")
        empty_store.set(ComponentKind.HOST, "example.com")

        results = []
        for page in range(1, 4):
            empty_store.set(ComponentKind.PATH, f"/page/{page}")
            results.append(empty_store.canonical_string())

        assert results == [
            "https://example.com/page/1",
            "https://example.com/page/2",
            "https://example.com/page/3",
        ]

    def test_repr_lists_present_slots(self, empty_store: ComponentStore) -> None:
        """Test that repr() shows only present slots."""
        empty_store.set(ComponentKind.SCHEME, "urn")

        assert repr(empty_store) == "ComponentStore(scheme='urn')"
