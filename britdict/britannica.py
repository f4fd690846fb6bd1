"""Related entries, definitions and the word of the day from the
Britannica dictionary (https://www.britannica.com/dictionary).

Every lookup is a single page fetch.  If the fetch fails, or the page
doesn't have the expected markup, the lookup returns empty data rather
than raising: a missing region of a page just means that part of the
result is left out.

The parse_* functions take an already-parsed page (or None), so they
can be checked against saved html.
"""

import logging
import sys
from urllib.parse import quote, urljoin, urlsplit

from britdict.utils import get_soup, node_text, DEFAULT_TIMEOUT


logger = logging.getLogger(__name__)

DOMAIN = 'https://www.britannica.com'


def _same_site(link, domain):
    a = urlsplit(link)
    b = urlsplit(domain)
    return (a.scheme, a.netloc) == (b.scheme, b.netloc)


def parse_entries(soup, domain = DOMAIN):
    if soup is None:
        return []
    olist = soup.select_one('ul.o_list')
    if olist is None:
        return []

    entries = []
    for li in olist.find_all('li', recursive=False):
        a = li.find('a')
        if a is None or a.get('href') is None:
            logger.debug(f'skipping entry without link: {li}')
            continue
        link = urljoin(f'{domain}/', a['href'].strip())
        if not _same_site(link, domain):
            logger.debug(f'skipping off-site entry: {link}')
            continue
        entries.append({
            'text': node_text(a),
            'link': link
        })
    return entries


def _headword_and_part(block):
    """Return (headword, part of speech) for a div.hw_d, with None for
    either one that's missing."""
    hw = block.select_one('span.hw_txt')
    fl = block.select_one('span.fl')
    return (
        node_text(hw) if hw is not None else None,
        node_text(fl) if fl is not None else None
    )


def parse_parts(soup):
    if soup is None:
        return []

    parts = []
    for block in soup.select('div.hw_d'):
        hw, fl = _headword_and_part(block)
        if not hw or not fl:
            logger.debug('skipping headword block without headword or part of speech')
            continue
        parts.append(f'{hw} ({fl})')
    return parts


def parse_definitions(soup):
    if soup is None:
        return []

    ret = []
    for sense in soup.select('div.sense'):
        definitions = [ node_text(d) for d in sense.select('span.def_text') ]
        definitions = [ d for d in definitions if d != '' ]
        if len(definitions) == 0:
            continue

        examples = [ node_text(e) for e in sense.select('li.vi') ]
        examples = [ e for e in examples if e != '' ]

        # All of the sense's examples go with each of its definitions;
        # the page doesn't say which example illustrates which.
        for d in definitions:
            ret.append({ 'meaning': d, 'examples': list(examples) })
    return ret


def _wod_word(soup):
    box = soup.select_one('div.hw_d')
    if box is None:
        return None
    hw, fl = _headword_and_part(box)
    if not hw:
        return None
    if not fl:
        return hw
    return f'{hw} ({fl})'


def _wod_image(soup):
    img = soup.select_one('div.wod_img_act img')
    if img is None:
        return None
    return {
        'src': (img.get('src') or '').strip(),
        'alt': (img.get('alt') or '').strip()
    }


def _wod_meanings(soup):
    box = soup.select_one('div.midbs')
    if box is None:
        return None

    meanings = []
    for midbt in box.select('div.midbt'):
        examples = []
        # Examples are in the lists following the definition, up to the
        # next definition.
        for sib in midbt.find_next_siblings():
            if 'midbt' in (sib.get('class') or []):
                break
            if sib.name == 'ul' or sib.select_one('ul') is not None:
                examples += [ node_text(li) for li in sib.select('li') ]
        meanings.append({
            'definition': node_text(midbt),
            'examples': [ e for e in examples if e != '' ]
        })
    return meanings


def parse_word_of_the_day(soup):
    if soup is None:
        return {}

    ret = {}
    regions = [
        ('word', _wod_word),
        ('image', _wod_image),
        ('meanings', _wod_meanings)
    ]
    for key, extract in regions:
        value = extract(soup)
        if value is None:
            logger.debug(f'word of the day: no {key}')
            continue
        ret[key] = value
    return ret


class Britannica:
    """Lookups against one dictionary domain."""

    def __init__(self, domain = DOMAIN, timeout = DEFAULT_TIMEOUT):
        self.domain = domain.rstrip('/')
        self.timeout = timeout

    def word_url(self, word):
        return f'{self.domain}/dictionary/{quote(word.strip())}'

    def word_of_the_day_url(self):
        return f'{self.domain}/dictionary/eb/word-of-day'

    def _soup(self, url):
        return get_soup(url, timeout = self.timeout)

    def get_entries(self, word):
        soup = self._soup(self.word_url(word))
        return parse_entries(soup, self.domain)

    def get_total_entries(self, word):
        return len(self.get_entries(word))

    def get_word_of_the_day(self):
        soup = self._soup(self.word_of_the_day_url())
        return parse_word_of_the_day(soup)

    def get_parts(self, word):
        soup = self._soup(self.word_url(word))
        return parse_parts(soup)

    def get_definitions(self, word):
        soup = self._soup(self.word_url(word))
        return parse_definitions(soup)

    def lookup(self, word):
        definitions = self.get_definitions(word)
        if len(definitions) == 0:
            return 'No match'

        def _def_print(d):
            ret = d['meaning']
            if len(d['examples']) > 0:
                ex = '; '.join([ f'"{e}"' for e in d['examples'] ])
                ret = f'{ret}. {ex}'
            return f'* {word}: {ret}'

        return '\n\n'.join([ _def_print(d) for d in definitions ])


_default = Britannica()


def get_entries(word):
    return _default.get_entries(word)


def get_total_entries(word):
    return _default.get_total_entries(word)


def get_word_of_the_day():
    return _default.get_word_of_the_day()


def get_parts(word):
    return _default.get_parts(word)


def get_definitions(word):
    return _default.get_definitions(word)


def lookup(word):
    return _default.lookup(word)


###############################
# Command-line check.

if __name__ == '__main__':
    if len(sys.argv) < 2:
        print('Search term required')
        sys.exit(1)
    word = sys.argv[1]
    print(lookup(word))
