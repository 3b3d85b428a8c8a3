"""Install the blog API package."""

from setuptools import setup, find_packages

setup(
    name='blog-api',
    version='0.1.0',
    packages=find_packages(exclude=['*test*']),
    python_requires='>=3.8',
    install_requires=[
        "flask",
        "flask-sqlalchemy>=3.0",
        "sqlalchemy>=1.4",
        "pyjwt>=2.0",
        "bcrypt",
        "pytz",
        "python-json-logger",
    ],
    extras_require={
        'test': ['pytest', 'pytest-mock'],
    },
    entry_points={
        'console_scripts': ['blog-api=blog_api.__main__:main'],
    },
    zip_safe=False
)
