"""Tests for precipitation amount, snow depth and begin/end timing rules."""


class TestAmounts:
    """Tests for precipitation amount groups."""

    def test_hourly(self, explain):
        assert explain('P0012') == 'Hourly Precipitation Rate: 0.12 inches'

    def test_three_hour(self, explain):
        assert explain('60217') == '3-hour precipitation amount: 2.170 inches'
        assert explain('60012') == '3-hour precipitation amount: 0.120 inches'

    def test_three_hour_missing(self, explain):
        assert explain('6////') == '3-hour precipitation amount: Missing or unavailable data'

    def test_daily(self, explain):
        assert explain('70125') == '24-hour precipitation amount: 1.25 inches'

    def test_snow_depth(self, explain):
        assert explain('4/001') == 'Snow depth: 1 inch'
        assert explain('4/012') == 'Snow depth: 12 inches'


class TestTiming:
    """Tests for precipitation begin and end groups."""

    def test_rain_began_and_ended(self, explain):
        assert explain('RAB15E30') == (
            'Rain began 15 minutes after the hour and ended 30 minutes after the hour'
        )

    def test_rain(self, explain):
        assert explain('RAB01') == 'Rain began 1 minute after the hour'
        assert explain('RAE42') == 'Rain ending 42 minutes after the hour'

    def test_drizzle(self, explain):
        assert explain('DZB10') == 'Drizzle began 10 minutes after the hour'
        assert explain('DZE10') == 'Drizzle ending 10 minutes after the hour'

    def test_snow(self, explain):
        assert explain('SNB05') == 'Snow began 5 minutes after the hour'
        assert explain('SNE30') == 'Snow ending 30 minutes after the hour'

    def test_categories(self, category):
        assert category('RAB15E30') == 'rain-begin-end'
        assert category('RAB15') == 'rain-begin'
