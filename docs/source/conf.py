import os
import sys
from datetime import datetime

sys.path.insert(0, os.path.abspath("../../src"))

project = "PySATL GGD"
copyright = f"{datetime.now().year}, PySATL project"
author = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
release = "0.1.0"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "sphinx.ext.mathjax",
    "sphinx_rtd_theme",
    "sphinx_autodoc_typehints",
    "sphinx_copybutton",
]
autosummary_generate = True
templates_path = []
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

# -- Napoleon (NumPy style docstrings) --
napoleon_google_docstring = False
napoleon_numpy_docstring = True
napoleon_include_init_with_doc = True
napoleon_include_private_with_doc = False
napoleon_use_admonition_for_examples = True
napoleon_use_admonition_for_references = True
napoleon_use_param = True
napoleon_use_rtype = True
napoleon_preprocess_types = True

# -- Autodocumentation settings --
autodoc_default_options = {
    "member-order": "bysource",
    "undoc-members": True,
    "exclude-members": "__weakref__",
    "show-inheritance": True,
}
autodoc_typehints = "description"
autodoc_typehints_format = "short"

# -- Intersphinx --
intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "scipy": ("https://docs.scipy.org/doc/scipy/", None),
}

# -- HTML --
html_theme = "sphinx_rtd_theme"
html_theme_options = {
    "collapse_navigation": False,
    "navigation_depth": 3,
}

copybutton_prompt_text = r">>> |\.\.\. |\$ "
copybutton_prompt_is_regexp = True

# forward references used in string annotations
autodoc_type_aliases = {
    "In": "typing.Any",
    "Out": "typing.Any",
    "ArrayLike": "numpy.typing.ArrayLike",
    "FloatArray": "pysatl_ggd.types.FloatArray",
    "DistributionType": "pysatl_ggd.types.DistributionType",
    "SamplingStrategy": "pysatl_ggd.distributions.strategies.SamplingStrategy",
    "ComputationStrategy": "pysatl_ggd.distributions.strategies.ComputationStrategy",
    "Parametrization": "pysatl_ggd.families.parametrizations.Parametrization",
    "Support": "pysatl_ggd.distributions.support.Support",
    "Sample": "pysatl_ggd.distributions.sampling.Sample",
    "Distribution": "pysatl_ggd.distributions.distribution.Distribution",
    "ParametricFamily": "pysatl_ggd.families.parametric_family.ParametricFamily",
    "RNGLike": "pysatl_ggd.distributions.streams.RNGLike",
}

nitpicky = False
