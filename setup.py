from setuptools import setup


setup(
    name='polacco',
    use_scm_version={
        # Builds from a plain source tree, without git metadata.
        'fallback_version': '0.1.0',
    },
    description='Interactive RPN calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['polacco'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.8',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    entry_points={
        'console_scripts': [
            'polacco = polacco.cli:main',
        ],
    },
    license='ISC',
)
