from setuptools import setup, find_packages

setup(
    name='Takeov3r',
    version='1.0',
    python_requires='>=3.7',
    install_requires=[
        'dnspython>=2.0.0',
        'requests>=2.25.0',
        'colorama>=0.4.4'  # For cross-platform colored output
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    packages=find_packages(exclude=['tests', 'tests.*']),
    py_modules=['takeov3r'],
    include_package_data=True,
    license='GPL-2.0',
    description='Detects subdomains with dangling CNAME records pointing at takeover-prone hosting services',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Information Technology',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: GNU General Public License v2',
        'Operating System :: POSIX :: Linux',
        'Operating System :: MacOS',
        'Operating System :: Microsoft :: Windows',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.7',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Security',
    ],
    keywords='subdomain takeover, dangling cname, dns, security, pentest',
    entry_points={
        'console_scripts': [
            'takeov3r = takeov3r:main',
        ],
    },
)
