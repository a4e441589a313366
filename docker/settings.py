import os

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'localdev-only-secret-key')

DEBUG = False

ALLOWED_HOSTS = os.getenv('ALLOWED_HOSTS', 'localhost').split(',')

INSTALLED_APPS = [
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'uw_saml',
    'group_importer.apps.GroupImporterConfig',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
]

ROOT_URLCONF = 'docker.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.getenv('DATABASE_PATH',
                          os.path.join(BASE_DIR, 'db.sqlite3')),
    }
}

if os.getenv('DATABASE_ENGINE', '') == 'postgres':
    DATABASES['default'] = {
        'ENGINE': 'django.db.backends.postgresql',
        'HOST': os.getenv('DATABASE_HOSTNAME', 'localhost'),
        'NAME': os.getenv('DATABASE_DB_NAME', 'group_importer'),
        'USER': os.getenv('DATABASE_USERNAME', None),
        'PASSWORD': os.getenv('DATABASE_PASSWORD', None),
    }

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'America/Los_Angeles'
USE_I18N = True
USE_TZ = True

STATIC_URL = '/static/'

LOGIN_URL = '/saml/login'

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(levelname)-4s %(asctime)s %(name)s %(message)s',
        },
    },
    'handlers': {
        'stdout': {
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stdout',
            'formatter': 'standard',
        },
        'null': {
            'class': 'logging.NullHandler',
        },
    },
    'loggers': {
        'group_importer': {
            'handlers': ['stdout'],
            'level': os.getenv('LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
        'django': {
            'handlers': ['stdout'],
            'level': 'WARNING',
        },
    },
}

GROUP_IMPORT_ADMIN_GROUP = os.getenv('ADMIN_GROUP', 'u_test_group')
GROUP_IMPORT_MANAGER_GROUP = os.getenv(
    'MANAGER_GROUP', GROUP_IMPORT_ADMIN_GROUP)
GROUP_IMPORT_IDNUMBER_GROUP = os.getenv(
    'IDNUMBER_GROUP', GROUP_IMPORT_ADMIN_GROUP)
GROUP_IMPORT_CSV_DELIMITER = os.getenv('CSV_DELIMITER', None)
GROUP_IMPORT_MAX_UPLOAD_SIZE = int(
    os.getenv('MAX_UPLOAD_SIZE', 10 * 1024 * 1024))

if os.getenv('ENV', 'localdev') == 'localdev':
    DEBUG = True
    MOCK_SAML_ATTRIBUTES = {
        'uwnetid': ['javerage'],
        'isMemberOf': ['u_test_group'],
    }
