import os.path

from setuptools import setup, find_packages


here = os.path.dirname(__file__)
readme_path = os.path.join(here, 'README.rst')
readme = open(readme_path).read()

setup(
    name='cronspec',
    version='1.0.0',
    description='Parser for cron schedule expressions and crontab files',
    long_description=readme,
    long_description_content_type='text/x-rst',
    url='https://github.com/cronspec/cronspec',
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12'
    ],
    keywords='cron crontab parser',
    license='MIT',
    package_dir={'': 'src'},
    packages=find_packages('src', exclude=['tests']),
    python_requires='>=3.8',
    install_requires=[
        'attrs >= 22.1',
    ],
    extras_require={
        'testing': [
            'pytest',
            'pytest-cov',
        ],
    },
    zip_safe=False,
)
