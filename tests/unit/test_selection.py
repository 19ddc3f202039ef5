"""Unit tests for selections and category responses."""

import pytest

from torn_api import (
    ApiCategoryResponse,
    ApiResponse,
    ApiSelection,
    FactionResponse,
    FactionSelection,
    KeyResponse,
    KeySelection,
    UserResponse,
    UserSelection,
    api_category,
)


class TestSelectionTokens:
    """Tests for selection wire tokens."""

    def test_user_basic_raw_value(self) -> None:
        """Test the user basic selection serializes to 'basic'."""
        assert UserSelection.BASIC.raw_value == "basic"

    @pytest.mark.parametrize(
        ("selection", "token"),
        [
            (UserSelection.PROFILE, "profile"),
            (UserSelection.DISCORD, "discord"),
            (UserSelection.PERSONAL_STATS, "personalstats"),
            (FactionSelection.BASIC, "basic"),
            (KeySelection.INFO, "info"),
        ],
    )
    def test_raw_values(self, selection: ApiSelection, token: str) -> None:
        """Test every selection maps to its documented token."""
        assert selection.raw_value == token
        assert type(selection)(token) is selection

    def test_categories(self) -> None:
        """Test each selection type reports its owning category."""
        assert UserSelection.category() == "user"
        assert FactionSelection.category() == "faction"
        assert KeySelection.category() == "key"
        assert UserSelection.BASIC.category() == "user"

    def test_same_token_different_category(self) -> None:
        """Test equal tokens in different categories are distinct selections."""
        assert UserSelection.BASIC.raw_value == FactionSelection.BASIC.raw_value
        assert UserSelection.BASIC != FactionSelection.BASIC
        assert not isinstance(FactionSelection.BASIC, UserSelection)


class TestApiCategory:
    """Tests for the api_category decorator."""

    def test_unbound_selection_type(self) -> None:
        """Test a selection type without a category is rejected."""

        class Unbound(ApiSelection):
            THING = "thing"

        with pytest.raises(TypeError, match="not bound to a category"):
            Unbound.category()

    def test_decorator_binds_category(self) -> None:
        """Test the decorator attaches the category token."""

        @api_category("market")
        class MarketSelection(ApiSelection):
            ITEM_MARKET = "itemmarket"

        assert MarketSelection.category() == "market"
        assert MarketSelection.ITEM_MARKET.raw_value == "itemmarket"

    def test_decorator_requires_api_selection(self) -> None:
        """Test non-selection classes cannot be bound."""
        with pytest.raises(TypeError):
            api_category("user")(dict)


class TestCategoryResponse:
    """Tests for category response types."""

    def test_selection_type_pairing(self) -> None:
        """Test each response names exactly its own selection type."""
        assert UserResponse.selection_type is UserSelection
        assert FactionResponse.selection_type is FactionSelection
        assert KeyResponse.selection_type is KeySelection
        assert UserResponse.category() == "user"

    def test_from_response(self, user_basic_json: dict) -> None:
        """Test from_response wraps the envelope without decoding."""
        envelope = ApiResponse.from_value(user_basic_json)
        response = UserResponse.from_response(envelope)

        assert isinstance(response, UserResponse)
        assert isinstance(response, ApiCategoryResponse)
        assert response.response is envelope

    def test_from_response_never_fails(self) -> None:
        """Test materializing from an unrelated document succeeds lazily."""
        response = FactionResponse.from_response(ApiResponse.from_value({}))
        assert isinstance(response, FactionResponse)
