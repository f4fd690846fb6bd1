import logging
import os
import sys

from britdict.config import Config


def must_exist(f):
    if not os.path.exists(f):
        print(f'\nMissing {f}, quitting.\n')
        sys.exit(1)


def get_config(args):
    if args.config is not None:
        must_exist(args.config)
        return Config.from_file(args.config)
    env_config = os.environ.get('BRITDICTCONFIG')
    if env_config is not None:
        must_exist(env_config)
        return Config.from_file(env_config)
    if not os.path.exists('config.ini'):
        # Defaults are fine.
        return Config()
    return Config.from_file('config.ini')


def print_entries(d, word):
    entries = d.get_entries(word)
    for entry in entries:
        print(entry['text'])
        print(entry['link'])
    print(len(entries))


def print_word_of_the_day(d):
    wod = d.get_word_of_the_day()
    if len(wod) == 0:
        print('No word of the day')
        return
    if 'word' in wod:
        print(wod['word'])
    if 'image' in wod:
        print(f"{wod['image']['alt']}: {wod['image']['src']}")
    for m in wod.get('meanings', []):
        print(f"* {m['definition']}")
        for e in m['examples']:
            print(f'  - {e}')


###############################

if __name__ == '__main__':

    import argparse
    parser = argparse.ArgumentParser(description='Britannica dictionary lookups')
    parser.add_argument("word", nargs="?", default="head", help="word to look up")
    parser.add_argument("-w", "--word-of-the-day", action="store_true", help="show the word of the day")
    parser.add_argument("-p", "--parts", action="store_true", help="show headwords and parts of speech")
    parser.add_argument("-d", "--definitions", action="store_true", help="show definitions and examples")
    parser.add_argument("-l", "--lookup", action="store_true", help="show definitions as text")
    parser.add_argument("-c", "--config", help="path to config .ini file")
    parser.add_argument("-v", dest="verbose", action="store_true", help="verbose mode")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s: %(message)s')

    config = get_config(args)
    d = config.dictionary()

    if args.word_of_the_day:
        print_word_of_the_day(d)
    elif args.parts:
        for p in d.get_parts(args.word):
            print(p)
    elif args.definitions:
        for defn in d.get_definitions(args.word):
            print(f"* {defn['meaning']}")
            for e in defn['examples']:
                print(f'  - {e}')
    elif args.lookup:
        print(d.lookup(args.word))
    else:
        print_entries(d, args.word)
