[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zainpay"
version = "0.1.0"
description = "Async client for the ZainPay payments API: zainboxes, virtual accounts, bank transfers, card payments and settlements"
requires-python = ">=3.10"
keywords = ["zainpay", "payment", "nigeria", "fintech", "virtual-account", "async"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Framework :: AsyncIO",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "httpx>=0.24",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "pytest-asyncio>=0.21",
]

[project.scripts]
zainpay = "zainpay.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zainpay"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
