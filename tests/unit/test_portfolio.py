"""Unit tests for propvest.application.services.portfolio module."""

import pytest

from propvest.application.services.portfolio import PropertyPortfolio, seed_properties
from propvest.core.exceptions import DuplicatePropertyError, PropertyNotFoundError


class TestSeed:
    """Tests for the startup record."""

    def test_seed_record(self):
        (seed,) = seed_properties()
        assert seed.id == "1"
        assert seed.price == 450_000
        assert seed.is_favorite
        assert len(seed.images) == 3

    def test_default_portfolio_selects_seed(self):
        portfolio = PropertyPortfolio()
        assert len(portfolio) == 1
        assert portfolio.selected.id == "1"

    def test_seed_copies_are_independent(self):
        first = PropertyPortfolio()
        first.toggle_favorite("1")
        assert PropertyPortfolio().get("1").is_favorite


class TestPropertyPortfolio:
    """Tests for PropertyPortfolio class."""

    @pytest.fixture
    def portfolio(self, sample_property):
        return PropertyPortfolio([sample_property])

    def test_add_goes_first_and_is_selected(self, portfolio, make_property):
        new = make_property(id="new-1", is_favorite=False)
        portfolio.add(new)
        assert [p.id for p in portfolio] == ["new-1", "austin-1"]
        assert portfolio.selected_id == "new-1"
        assert portfolio.selected is new

    def test_add_duplicate_rejected(self, portfolio, make_property):
        with pytest.raises(DuplicatePropertyError):
            portfolio.add(make_property())

    def test_duplicate_initial_ids_rejected(self, make_property):
        with pytest.raises(DuplicatePropertyError):
            PropertyPortfolio([make_property(), make_property()])

    def test_get_unknown(self, portfolio):
        with pytest.raises(PropertyNotFoundError):
            portfolio.get("missing")

    def test_not_found_is_key_error(self, portfolio):
        with pytest.raises(KeyError):
            portfolio.get("missing")

    def test_update_replaces(self, portfolio, make_property):
        edited = make_property(nightly_rate=310)
        portfolio.update(edited)
        assert portfolio.get("austin-1").nightly_rate == 310

    def test_update_unknown(self, portfolio, make_property):
        with pytest.raises(PropertyNotFoundError):
            portfolio.update(make_property(id="ghost"))

    def test_toggle_favorite(self, portfolio):
        assert portfolio.toggle_favorite("austin-1").is_favorite is False
        assert portfolio.toggle_favorite("austin-1").is_favorite is True

    def test_favorites_view(self, portfolio, make_property):
        portfolio.add(make_property(id="other", is_favorite=False))
        assert [p.id for p in portfolio.filtered(favorites_only=True)] == ["austin-1"]
        assert len(portfolio.filtered()) == 2

    def test_remove_selected_falls_back_to_first(self, portfolio, make_property):
        portfolio.add(make_property(id="other"))
        portfolio.remove("other")
        assert portfolio.selected_id is None
        assert portfolio.selected.id == "austin-1"
        assert "other" not in portfolio

    def test_empty_portfolio(self):
        portfolio = PropertyPortfolio([])
        assert portfolio.selected is None
        assert portfolio.filtered() == []

    def test_select(self, portfolio, make_property):
        portfolio.add(make_property(id="other"))
        portfolio.select("austin-1")
        assert portfolio.selected.id == "austin-1"

    def test_metrics_follow_edits(self, portfolio):
        before = portfolio.metrics("austin-1")
        portfolio.get("austin-1").occupancy_rate = 80
        after = portfolio.metrics("austin-1")
        assert after.gross_annual_revenue > before.gross_annual_revenue
