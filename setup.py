from setuptools import setup, find_packages

# Runtime dependencies
install_requires = [
    "colorama>=0.4.6",
    "PyYAML>=6.0.1",
    "pathspec>=0.11.2",
    "jsonschema>=4.19.0",
]

# Development dependencies
extras_require = {
    'dev': [
        'pytest>=7.4.0',
        'pytest-cov>=4.1.0',
    ]
}

setup(
    name="lsconfig",
    version="1.0.0",
    license='GNU GPLv3',
    description="Layered option resolution and icon theming for directory listings",
    packages=find_packages(include=["lsconfig", "lsconfig.*"]),
    python_requires='>=3.9',
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "lsconfig=lsconfig.main:run",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3.9",
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
)
