"""Tests for verity.context — request-scoped ContextVar access."""

import asyncio

import pytest

from verity.config import ValidationConfig
from verity.context import get_validation, validation_scope, validation_var
from verity.validation import ValidationContext


class TestValidationVar:
    def test_get_validation_raises_outside_scope(self) -> None:
        """get_validation raises LookupError when no scope is active."""
        with pytest.raises(LookupError):
            get_validation()

    def test_set_and_get(self) -> None:
        ctx = ValidationContext()
        token = validation_var.set(ctx)
        try:
            assert get_validation() is ctx
        finally:
            validation_var.reset(token)


class TestValidationScope:
    def test_yields_current_context(self) -> None:
        with validation_scope() as ctx:
            assert get_validation() is ctx
            assert isinstance(ctx, ValidationContext)

    def test_reset_on_exit(self) -> None:
        with validation_scope():
            pass
        with pytest.raises(LookupError):
            get_validation()

    def test_reset_on_error(self) -> None:
        with pytest.raises(RuntimeError), validation_scope():
            raise RuntimeError("boom")
        with pytest.raises(LookupError):
            get_validation()

    def test_nested_scopes_restore_outer(self) -> None:
        with validation_scope() as outer:
            outer.required("").key("outer")
            with validation_scope() as inner:
                assert get_validation() is inner
                assert not inner.has_errors
            assert get_validation() is outer
            assert outer.messages() == {"outer": "Required"}

    def test_config_passed_through(self) -> None:
        config = ValidationConfig(allow_rekey=True)
        with validation_scope(config) as ctx:
            assert ctx.config is config

    def test_helpers_share_the_scope(self) -> None:
        def check_name(name: str) -> None:
            get_validation().required(name).key("name")

        with validation_scope() as ctx:
            check_name("")
        assert ctx.messages() == {"name": "Required"}

    def test_tasks_are_isolated(self) -> None:
        async def handle(value: str) -> dict[str, str]:
            with validation_scope() as ctx:
                await asyncio.sleep(0)
                get_validation().required(value).key("field")
                await asyncio.sleep(0)
                return ctx.messages()

        async def main() -> list[dict[str, str]]:
            return list(await asyncio.gather(handle(""), handle("ok"), handle("")))

        results = asyncio.run(main())
        assert results == [{"field": "Required"}, {}, {"field": "Required"}]
