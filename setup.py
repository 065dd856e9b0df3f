from setuptools import setup, find_packages

setup(
    name="web-test-core",
    version="1.0.0",
    description="Readiness-gated waits, element actions and retrying browser session bootstrap for Selenium UI tests",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "selenium>=4.11.0",
        "webdriver-manager>=4.0.0",
        "python-dotenv>=1.0.0",
        "urllib3>=1.26",
        "requests>=2.28",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
)
