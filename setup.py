from setuptools import setup, find_packages

setup(name="skystreak",
      version="0.1.0",
      description="Merge, measure and classify streaks of outlying pixels in astronomical image sequences",
      packages=find_packages(include=["skystreak", "skystreak.*"]),
      python_requires=">=3.10",
      install_requires=["numpy", "scipy", "pandas"],
      extras_require={"test": ["pytest"]})
