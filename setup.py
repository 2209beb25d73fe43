import setuptools

setuptools.setup(
    name='xetex_format',
    version='0.1',
    license='MIT',
    zip_safe=False,
    packages=setuptools.find_packages(include=['xetex_format', 'xetex_format.*']),
    python_requires='>=3.8',
    install_requires=[
        'pyyaml', 'rich'
    ],
    entry_points={
        'console_scripts': ['xetex-format = xetex_format.main:main'],
    },
    description='Versioned glue parameter registry and C header generator for the XeTeX engine format.',
)
