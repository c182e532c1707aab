"""Tests for DialogRegistry."""

import pytest

from botcore.dialogs import MAX_COMPLEXITY, DefaultDialog, DialogRegistry, text_dialog
from botcore.errors import DialogNotFoundError


class TestDialogRegistryResolve:
    """Tests for DialogRegistry.resolve() and get()."""

    def test_builtin_default_dialog(self, config, memory_brain):
        """default_dialog is provided by the built-in set."""
        registry = DialogRegistry.with_builtins(config, memory_brain)

        dialog = registry.resolve("default_dialog")

        assert isinstance(dialog, DefaultDialog)
        assert dialog.config is config
        assert dialog.brain is memory_brain

    def test_bot_dialog_overrides_builtin(self, config, memory_brain):
        """Bot dialogs are looked up before the built-in set."""
        registry = DialogRegistry.with_builtins(
            config, memory_brain, {"default_dialog": text_dialog("custom")}
        )

        dialog = registry.resolve("default_dialog")

        assert not isinstance(dialog, DefaultDialog)
        assert dialog.text == "custom"

    def test_unknown_label_resolves_to_none(self, config, memory_brain):
        """Unknown labels are not found."""
        registry = DialogRegistry.with_builtins(config, memory_brain)

        assert registry.resolve("ghost") is None
        assert not registry.has("ghost")

    def test_get_unknown_label_raises(self, config, memory_brain):
        """get() signals unknown labels."""
        registry = DialogRegistry.with_builtins(config, memory_brain)

        with pytest.raises(DialogNotFoundError, match="ghost"):
            registry.get("ghost")

    def test_each_lookup_builds_new_instance(self, config, memory_brain):
        """Handlers are built per lookup."""
        registry = DialogRegistry.with_builtins(config, memory_brain)

        assert registry.get("default_dialog") is not registry.get("default_dialog")

    def test_register_adds_highest_priority(self, config, memory_brain):
        """register() adds to the first provider."""
        registry = DialogRegistry(
            config, memory_brain, [{}, {"hello": text_dialog("builtin hello")}]
        )

        registry.register("hello", text_dialog("bot hello"))

        assert registry.get("hello").text == "bot hello"
        assert registry.labels() == ["hello"]

    def test_providers_are_copied(self, config, memory_brain):
        """Registering does not mutate the provider mappings passed in."""
        bot_dialogs = {}
        registry = DialogRegistry.with_builtins(config, memory_brain, bot_dialogs)

        registry.register("hello", text_dialog("hi"))

        assert bot_dialogs == {}

    def test_labels_lists_all_providers(self, config, memory_brain):
        """labels() lists bot dialogs first, without duplicates."""
        registry = DialogRegistry.with_builtins(
            config, memory_brain, {"hello": text_dialog("hi")}
        )

        assert registry.labels() == ["hello", "default_dialog"]


class TestDialogRegistryComplexity:
    """Tests for DialogRegistry.complexity()."""

    def test_declared_complexity(self, config, memory_brain, scripted):
        registry = DialogRegistry.with_builtins(
            config, memory_brain, {"a": scripted("a", complexity=2)}
        )

        assert registry.complexity("a") == 2

    def test_default_complexity_is_max(self, config, memory_brain):
        registry = DialogRegistry.with_builtins(
            config, memory_brain, {"hello": text_dialog("hi")}
        )

        assert registry.complexity("hello") == MAX_COMPLEXITY
        assert registry.complexity("ghost") == MAX_COMPLEXITY

    def test_class_complexity_read_without_building(self, config, memory_brain):
        built = []

        class CountedDialog:
            complexity = 3

            def __init__(self, config, brain):
                built.append(self)

            async def execute(self, user_id, messages, entities, is_resumed):
                return True

        registry = DialogRegistry.with_builtins(
            config, memory_brain, {"counted": CountedDialog}
        )

        assert registry.complexity("counted") == 3
        assert built == []

    def test_bot_dialog_shadows_builtin_complexity(
        self, config, memory_brain, scripted
    ):
        registry = DialogRegistry.with_builtins(
            config, memory_brain, {"default_dialog": scripted("d", complexity=1)}
        )

        assert registry.complexity("default_dialog") == 1
