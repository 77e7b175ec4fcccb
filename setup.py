from setuptools import setup, find_namespace_packages
setup(
        name='eqset',
        version='0.1',
        description='Sets keyed on equality alone, for unhashable and heterogeneous elements',
        author='eqset developers',
        license='MIT',
        packages=find_namespace_packages(include=['eqset', 'eqset.*']),
        install_requires=[],
        extras_require={'test' : ['pytest']},
        python_requires='>=3.6'
)
