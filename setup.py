
from setuptools import setup

setup(
    name =             "cuiwin",
    version =          "0.0.1",
    author =           "Christoph Landgraf",
    author_email =     "christoph.landgraf@googlemail.com",
    description =      "Draggable, resizable windows for text UIs",
    license =          "BSD",
    url =              "https://github.com/clandgraf/cui",
    packages =         ['cuiwin', 'cuiwin.term'],
    extras_require =   {'test': ['pytest']},
    entry_points =     {'console_scripts': [
        'cuiwin = cuiwin.__main__:main',
    ]}
)
