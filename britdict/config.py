import configparser

from britdict.britannica import Britannica, DOMAIN
from britdict.utils import DEFAULT_TIMEOUT


class Config(configparser.ConfigParser):

    def __init__(self):
        super().__init__()
        self['Britannica'] = {
            'Domain': DOMAIN,
            'Timeout': str(DEFAULT_TIMEOUT)
        }

    @staticmethod
    def from_file(filename):
        """Return Config for filename, defaults filled in for missing keys."""
        config = Config()
        config.read(filename)
        return config

    @property
    def domain(self):
        return self['Britannica'].get('Domain', DOMAIN)

    @property
    def timeout(self):
        return self['Britannica'].getfloat('Timeout', DEFAULT_TIMEOUT)

    def dictionary(self):
        return Britannica(domain = self.domain, timeout = self.timeout)
