import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="puppetdashboard_health",
    version="0.0.1",
    description="puppet dashboard node status for zabbix",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    package_dir={"": "."},
    packages=setuptools.find_packages(where=".", exclude=["tests"]),
    scripts=["puppetdashboard_status.py"],
    install_requires=[
        "pendulum",
        "requests",
        "sentry-sdk",
        "toml",
        "urllib3",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
)
