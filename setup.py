from setuptools import setup

setup(
    name='atmfjstc-int32-bit-ops',
    version='0.1.0',

    author_email='atmfjstc@protonmail.com',

    package_dir={'': 'src'},
    packages=['atmfjstc.lib.int32_bit_ops'],

    zip_safe=True,

    description="Primitive bitwise arithmetic over 32-bit two's-complement integers",

    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Typing :: Typed",
    ],
    python_requires='>=3.7',
)
