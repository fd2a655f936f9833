from pathlib import Path
from setuptools import setup

root_dir = Path(__file__).parent
with open(root_dir / "README.md") as f:
    readme = f.read()

extras_require = {
    "dev": ["pytest", "nox", "ruff", "mypy", "Pillow"],
    "image": ["Pillow"],
}

setup(
    name="pakraster",
    version="0.1.0",
    packages=["pakraster"],
    package_data={"pakraster": ["py.typed"]},
    install_requires=[],
    extras_require=extras_require,
    description="Decoder for run-length encoded world map PAK rasters",
    long_description=readme,
    long_description_content_type="text/markdown",
    license="MIT",
    keywords=[
        "pak",
        "run-length",
        "raster",
        "world map",
    ],
    python_requires=">=3.10",
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Programming Language :: Python :: 3 :: Only",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    ],
)
