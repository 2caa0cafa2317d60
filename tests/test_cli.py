import datetime as dt
import json
import unittest
from unittest.mock import patch

from click.testing import CliRunner

from dividend_history import cli
from dividend_history.models import DividendRecord, SplitRecord


def recent_records():
    today = dt.date.today()
    return [
        DividendRecord(date=today - dt.timedelta(days=365 * years + 30), adj_dividend=1.0 + 0.1 * (4 - years))
        for years in range(4)
    ]


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()
        patchers = [
            patch("dividend_history.fetch.fetch_dividends", return_value=recent_records()),
            patch("dividend_history.fetch.fetch_company_name", return_value="Apple Inc."),
            patch(
                "dividend_history.fetch.fetch_splits",
                return_value=[SplitRecord(dt.date(2020, 8, 31), 4, 1)],
            ),
        ]
        self.mocks = [p.start() for p in patchers]
        for p in patchers:
            self.addCleanup(p.stop)

    def test_stats(self):
        result = self.runner.invoke(cli.main, ["stats", "aapl", "--lang", "en"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Apple Inc. (AAPL) Dividend History", result.output)
        self.assertIn("3 Years", result.output)
        self.assertIn("N/A", result.output)
        self.assertIn("1.4000", result.output)
        self.assertIn("4:1", result.output)
        self.assertIn("08/31/2020", result.output)

    def test_stats_without_splits(self):
        self.mocks[2].return_value = None
        result = self.runner.invoke(cli.main, ["stats", "AAPL", "--lang", "en"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("No split history", result.output)

    def test_stats_json(self):
        result = self.runner.invoke(cli.main, ["stats", "AAPL", "--lang", "en", "--json"])
        self.assertEqual(result.exit_code, 0, result.output)
        data = json.loads(result.output)
        self.assertEqual(data["state"], "success")
        self.assertEqual(len(data["records"]), 4)
        self.assertIsNone(data["growth"]["10"])
        self.assertEqual(data["splits"][0]["ratio"], "4:1")

    def test_stats_keeps_four_decimals(self):
        self.mocks[0].return_value = [DividendRecord(date=dt.date.today() - dt.timedelta(days=40), adj_dividend=0.5)]
        result = self.runner.invoke(cli.main, ["stats", "AAPL", "--lang", "en"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("0.5000", result.output)

    def test_payment_details(self):
        paid = dt.date.today() - dt.timedelta(days=20)
        declared = dt.date.today() - dt.timedelta(days=60)
        self.mocks[0].return_value = [
            DividendRecord(
                date=dt.date.today() - dt.timedelta(days=40),
                adj_dividend=0.24,
                dividend=0.96,
                record_date=dt.date.today() - dt.timedelta(days=39),
                payment_date=paid,
                declaration_date=declared,
            )
        ]
        result = self.runner.invoke(cli.main, ["stats", "AAPL", "--lang", "en"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Payment Date", result.output)
        self.assertIn(paid.strftime("%m/%d/%Y"), result.output)

        result = self.runner.invoke(cli.main, ["stats", "AAPL", "--lang", "en", "--json"])
        record = json.loads(result.output)["records"][0]
        self.assertEqual(record["dividend"], 0.96)
        self.assertEqual(record["payment_date"], paid.isoformat())
        self.assertEqual(record["declaration_date"], declared.isoformat())
        self.assertIsNotNone(record["record_date"])

    def test_chart(self):
        result = self.runner.invoke(cli.main, ["chart", "AAPL", "--lang", "en"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("$1.1000", result.output)
        self.assertIn("Y-axis range", result.output)

    def test_no_data_prints_tips(self):
        self.mocks[0].return_value = []
        result = self.runner.invoke(cli.main, ["stats", "ZZZZ", "--lang", "en"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("No dividend data found for this symbol", result.output)
        self.assertIn("KO - The Coca-Cola Company", result.output)

    def test_blank_symbol(self):
        result = self.runner.invoke(cli.main, ["stats", " ", "--lang", "zh"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("请输入股票代码", result.output)
        self.mocks[0].assert_not_called()


if __name__ == "__main__":
    unittest.main()
