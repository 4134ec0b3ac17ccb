import os
from pathlib import Path

from setuptools import Extension, setup

dirs = (
    'twkb/lib',
)

blacklist: dict[str, set[str]] = {
    'twkb/lib': {
        'shapely_convert.py',
    }
}

ext_modules = []

# opt-in: the pure-Python modules work without compilation
if os.getenv('TWKB_CYTHON'):
    import Cython.Compiler.Options as Options
    from Cython.Build import cythonize

    Options.docstrings = False
    Options.annotate = True

    paths = []
    for dir in dirs:
        dir_blacklist = blacklist.get(dir, set())
        for p in Path(dir).rglob('*.py'):
            if p.name not in dir_blacklist:
                paths.append(p)  # noqa: PERF401

    ext_modules = cythonize(
        [
            Extension(
                path.with_suffix('').as_posix().replace('/', '.'),
                [str(path)],
                extra_compile_args=[
                    '-march=x86-64-v3',
                    '-mtune=generic',
                    '-ffast-math',
                ],
            )
            for path in paths
        ],
        nthreads=os.cpu_count(),
        compiler_directives={
            # https://cython.readthedocs.io/en/latest/src/userguide/source_files_and_compilation.html#compiler-directives
            'overflowcheck': True,
            'language_level': 3,
        },
    )

setup(ext_modules=ext_modules)
