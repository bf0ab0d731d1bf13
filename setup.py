from setuptools import setup, find_packages

setup(
    name="emergent_qa",
    version="0.1.0",
    packages=find_packages(include=["emergent_qa", "emergent_qa.*"]),
    include_package_data=True,
    package_data={"emergent_qa.reporting": ["templates/*.html"]},
    install_requires=[
        "playwright==1.52.0",
        "pydantic",
        "python-dotenv",
        "pyyaml",
        "jinja2",
        "Faker",
        "pytest",
    ],
    python_requires='>=3.10',
)
