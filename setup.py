import os

from setuptools import setup, find_packages


def get_ext_modules():
    if os.environ.get("LL_TLPARSE_USE_MYPYC") != "1":
        return []

    from mypyc.build import mypycify

    return mypycify([
        'll_tlparse/tl/tl.py',
    ])


setup(
    name="ll-tlparse",
    version="1.0.0",
    description="Decode Telegram telegram_api, td_api and mtproto_api TL buffers into JSON",
    license="AGPL-3.0-or-later",
    python_requires=">=3.10",
    packages=find_packages(include=("ll_tlparse", "ll_tlparse.*")),
    package_data={
        "ll_tlparse": ["resources/tl/*.tl"],
    },
    ext_modules=get_ext_modules(),
    extras_require={
        "test": ["pytest"],
        "mypyc": ["mypy"],
    },
    entry_points={
        "console_scripts": [
            "ll-tlparse = ll_tlparse.cli:main",
        ],
    },
)
