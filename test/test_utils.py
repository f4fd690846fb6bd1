import unittest
from unittest.mock import patch, Mock

import requests

from britdict.utils import clean_text, get_soup


class TestUtils_clean_text(unittest.TestCase):

    def test_clean_text(self):
        cases = [
            [ '  head  ', 'head' ],
            [ 'a\n   person\'s\tmind', "a person's mind" ],
            [ '', '' ],
            [ None, '' ]
        ]
        for c in cases:
            self.assertEqual(clean_text(c[0]), c[1], c[0])


class TestUtils_get_soup(unittest.TestCase):

    def response(self, body, status_error = None):
        r = Mock()
        r.content = body.encode('utf-8')
        if status_error is not None:
            r.raise_for_status.side_effect = status_error
        return r

    @patch('britdict.utils.get')
    def test_parses_page(self, mock_get):
        mock_get.return_value = self.response('<ul class="o_list"><li>café</li></ul>')
        soup = get_soup('https://www.britannica.com/dictionary/cafe')
        self.assertEqual(soup.select_one('ul.o_list li').text, 'café')
        mock_get.assert_called_once_with('https://www.britannica.com/dictionary/cafe', timeout = 10)

    @patch('britdict.utils.get')
    def test_bad_bytes_still_parse(self, mock_get):
        r = Mock()
        r.content = b'<p>caf\xe9 au lait</p>'
        mock_get.return_value = r
        soup = get_soup('https://www.britannica.com/dictionary/cafe')
        self.assertIsNotNone(soup)
        self.assertEqual(soup.select_one('p').text, 'caf\ufffd au lait')

    @patch('britdict.utils.get')
    def test_transport_error_returns_none_and_logs(self, mock_get):
        mock_get.side_effect = requests.ConnectionError('no network')
        with self.assertLogs('britdict.utils', level='WARNING') as logs:
            soup = get_soup('https://www.britannica.com/dictionary/head')
        self.assertIsNone(soup)
        self.assertIn('no network', logs.output[0])

    @patch('britdict.utils.get')
    def test_http_error_returns_none(self, mock_get):
        mock_get.return_value = self.response('not found', requests.HTTPError('404'))
        with self.assertLogs('britdict.utils', level='WARNING'):
            self.assertIsNone(get_soup('https://www.britannica.com/dictionary/zzzz'))

    @patch('britdict.utils.get')
    def test_timeout_passed_through(self, mock_get):
        mock_get.return_value = self.response('<p>x</p>')
        get_soup('https://example.com', timeout = 3)
        mock_get.assert_called_once_with('https://example.com', timeout = 3)
