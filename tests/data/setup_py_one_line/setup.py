from setuptools import setup

setup(name="my-app", version="4.5.6", packages=["my_app"])
