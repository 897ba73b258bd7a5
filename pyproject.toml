[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mahasiswa-ambis"
version = "0.1.0"
description = "A side-scrolling platformer about an ambitious student collecting books and coins across campus"
requires-python = ">=3.10"
keywords = ["game", "platformer", "side-scroller", "pygame", "gif", "lzw"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mahasiswa-ambis = "mahasiswa_ambis.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mahasiswa_ambis"]

[tool.pytest.ini_options]
addopts = "-ra"
