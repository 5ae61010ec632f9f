from setuptools import find_packages, setup

from pathlib import Path


def read_version(package):
    with (Path(package) / '__init__.py').open() as fd:
        for line in fd:
            if line.startswith('__version__ = '):
                return line.split()[-1].strip().strip("'")


version = read_version('kube_workload')


def readme():
    return open('README.rst', encoding='utf-8').read()


install_requires = [
    'pykube-ng',
    'requests'
]

tests_require = [
    'pytest',
    'pytest-cov'
]

setup(
    name='kubectl-workload',
    packages=find_packages(exclude=['tests']),
    version=version,
    description='kubectl plugin to stop and start Kubernetes workloads',
    long_description=readme(),
    long_description_content_type='text/x-rst',
    keywords='kubernetes kubectl plugin operations',
    license='GNU General Public License v3 (GPLv3)',
    install_requires=install_requires,
    tests_require=tests_require,
    extras_require={'tests': tests_require},
    test_suite='tests',
    python_requires='>=3.7',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: System :: Clustering',
    ],
    entry_points={'console_scripts': ['kubectl-workload = kube_workload.main:main']}
)
