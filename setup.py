from setuptools import setup, find_namespace_packages

extras_require = {
    "dev": [
        "black==23.3.0",
        "flake8==6.1.0",
        "Flake8-pyproject==1.2.3",
        "isort==5.12.0",
        "mypy==1.5.1",
        "poethepoet==0.22.0",
        "pytest-cov==4.1.0",
        "pytest>=8.2.0",
        "beartype>=0.18.0",
    ],
    "beartype": [
        "beartype>=0.18.0",
    ],
}
extras_require["all"] = [item for name, group in extras_require.items() if name != "dev" for item in group]

setup(
    name="nhs-number",
    packages=find_namespace_packages(where="src"),
    version="0.1.0",
    package_dir={"": "src"},
    package_data={
        "nhs_number.util": ["py.typed"],
        "nhs_number.service": ["py.typed"],
    },
    description="NHS Number parsing, formatting and check digit validation",
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0.0,<3.0.0",
        "pydantic-settings>=2.5.0,<3.0.0",
        "sentry-sdk>=1.39.1",
    ],
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "nhs-number=nhs_number.cli:main",
        ],
    },
    test_suite="tests",
)
