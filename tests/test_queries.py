from __future__ import annotations

from swop_client.services.rates import queries


def test_latest_with_base_and_symbols():
    query = queries.latest_query("usd, gbp", "eur")
    assert query == (
        'query { latest(baseCurrency: "EUR", quoteCurrencies: ["USD", "GBP"]) '
        "{ date baseCurrency quoteCurrency quote } }"
    )


def test_latest_without_arguments_or_meta():
    assert queries.latest_query("") == "query { latest { date baseCurrency quoteCurrency quote } }"
    assert "meta {" in queries.latest_query(["USD"], meta=True)


def test_historical_puts_date_first():
    query = queries.historical_query("2020-01-01", "USD")
    assert query.startswith('query { historical(date: "2020-01-01", quoteCurrencies: ["USD"])')


def test_time_series_dates():
    query = queries.time_series_query("2020-01-01", "2020-01-31", "USD", "EUR")
    assert 'dateStart: "2020-01-01", dateEnd: "2020-01-31", baseCurrency: "EUR"' in query
    assert query.startswith("query { timeSeries(")


def test_currencies_filter():
    assert 'currencyCodes: ["CHF"]' in queries.currencies_query("chf")
    assert queries.currencies_query().startswith("query { currencies {")


def test_split_symbols():
    assert queries.split_symbols(" usd,,gbp ") == ["USD", "GBP"]
    assert queries.split_symbols(None) == []
