import os

# must be set before twkb.config is imported
os.environ.setdefault('TWKB_ENV', 'test')
