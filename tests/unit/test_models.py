"""
Unit Tests for Data Models

Tests the Article model.
"""

import pytest
from datetime import datetime
from models import Article


class TestArticleModel:
    """Test Article dataclass."""

    def test_article_creation(self):
        """Test: Create article with required fields."""
        article = Article(
            id='test-article',
            title='Test Title',
            date='01-15-2024'
        )

        assert article.id == 'test-article'
        assert article.title == 'Test Title'
        assert article.date == '01-15-2024'

    def test_optional_fields(self):
        """Test: Optional fields get their defaults."""
        article = Article(id='test', title='Test', date='01-15-2024')

        assert article.categories == []
        assert article.article_type == 'misc'
        assert article.content_html is None
        assert article.preview is None

    def test_categories_not_shared(self):
        """Test: Each article gets its own categories list."""
        first = Article(id='a', title='A', date='01-01-2024')
        second = Article(id='b', title='B', date='01-01-2024')

        first.categories.append('DEVLOG')

        assert second.categories == []

    def test_date_obj_property(self):
        """Test: date_obj parses MM-DD-YYYY."""
        article = Article(id='test', title='Test', date='01-15-2024')

        date_obj = article.date_obj
        assert isinstance(date_obj, datetime)
        assert date_obj.year == 2024
        assert date_obj.month == 1
        assert date_obj.day == 15

    def test_date_obj_invalid(self):
        """Test: Unparseable dates sort as the oldest possible date."""
        assert Article(id='x', title='X', date='2024-01-15').date_obj == datetime.min
        assert Article(id='x', title='X', date='not a date').date_obj == datetime.min

    def test_formatted_date_property(self):
        """Test: formatted_date returns long human-readable date."""
        article = Article(id='test', title='Test', date='01-01-2024')

        assert article.formatted_date == 'January 1st 2024'

    @pytest.mark.parametrize("date,expected", [
        ('06-02-2024', 'June 2nd 2024'),
        ('06-03-2024', 'June 3rd 2024'),
        ('06-04-2024', 'June 4th 2024'),
        ('06-11-2024', 'June 11th 2024'),
        ('06-12-2024', 'June 12th 2024'),
        ('06-13-2024', 'June 13th 2024'),
        ('06-21-2024', 'June 21st 2024'),
        ('06-22-2024', 'June 22nd 2024'),
        ('06-23-2024', 'June 23rd 2024'),
        ('12-31-2023', 'December 31st 2023'),
    ])
    def test_formatted_date_ordinals(self, date, expected):
        """Test: Day suffixes follow English ordinals."""
        assert Article(id='x', title='X', date=date).formatted_date == expected

    def test_formatted_date_invalid(self):
        """Test: Unparseable dates are displayed as authored."""
        article = Article(id='x', title='X', date='someday')

        assert article.formatted_date == 'someday'
