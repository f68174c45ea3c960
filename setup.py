import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="polyoptics",
    version="0.1.0",
    author="Michael J Hayford",
    author_email="mjhoptics@gmail.com",
    description="Spectral lens rendering with polynomial optics",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    license="BSD-3-Clause",
    package_dir={'': 'src'},
    packages=setuptools.find_packages('src'),
    package_data={'polyoptics.util': ['cie-cmf.txt']},
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Physics",
    ],
    keywords=['polynomial optics', 'ray tracing', 'image forming optics',
              'paraxial optics', 'chromatic aberration', 'depth of field',
              'rendering'],
    install_requires=[
        "opticalglass",
        "numpy>=1.17.0",
        "scipy>=1.1.0",
        "json_tricks>=3.12.1",
        "attrs>=18.1.0",
        "opencv-python>=4.0",
        ],
    extras_require={
        'test': ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'polyoptics-render = polyoptics.renderapp:main',
        ],
    },
)
