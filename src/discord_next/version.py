VERSION = '0.1.0'
PROJECT_URL = 'https://pypi.org/project/discord-next'
