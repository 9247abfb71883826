"""
Test settings.
"""
from .base import *  # noqa: F401,F403
from .base import BASE_DIR, CHECKOUT

# File-backed SQLite so threaded tests share one database. IMMEDIATE mode takes
# the write lock at BEGIN, which serializes concurrent commits like row locks do.
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
        'OPTIONS': {
            'transaction_mode': 'IMMEDIATE',
            'timeout': 20,
        },
        'TEST': {
            'NAME': BASE_DIR / 'test_db.sqlite3',
        },
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True
CELERY_BROKER_URL = 'memory://'
CELERY_RESULT_BACKEND = 'cache+memory://'

EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'

CHECKOUT = {
    **CHECKOUT,
    'TAX_RATE': '0.10',
    'FLAT_SHIPPING_FEE': '10.00',
    'LOWSTOCK_THRESHOLD': '2',
    'LOWSTOCK_NOTIFICATION_EMAIL': 'stock@example.com',
    'ORDER_NUMBER_MAX_ATTEMPTS': '5',
}
