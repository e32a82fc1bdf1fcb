from setuptools import setup, find_packages
import os

# Read the long description from README.md if it exists
long_description = ""
if os.path.isfile("README.md"):
    with open("README.md", "r", encoding="utf-8") as f:
        long_description = f.read()

setup(
    name='audio_effects_config',
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    description='Parser for audio effects configuration files (libraries, effects and processing chains)',
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='Apache-2.0',
    keywords=['audio', 'effects', 'configuration', 'parser'],

    # These are the runtime dependencies for your package:
    install_requires=[
        'PyYAML>=5.1',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Topic :: Multimedia :: Sound/Audio',
    ],

    python_requires='>=3.8',
    include_package_data=True,
    zip_safe=False,
)
