# %% [markdown]
# # Use typefactory
#
# Productions register themselves when their module is imported; callers
# only need the capability class and a type id.

# %%
from abc import ABC, abstractmethod

import typefactory
from typefactory import Producible, add_production, production_type_id

typefactory.setup_logging()

# %% [markdown]
# ## Define a capability and its productions

# %%
class Greeter(ABC):
    @abstractmethod
    def greet(self) -> str:
        ...


@add_production(Greeter)
@production_type_id("en")
class English(Producible, Greeter):
    def greet(self) -> str:
        return "hello"


@add_production(Greeter)
@production_type_id("fr")
class French(Producible, Greeter):
    def greet(self) -> str:
        return "bonjour"


# %%
print("Available greeters:")
print(typefactory.list_types(Greeter))

# %% [markdown]
# ## Create objects by type id
#
# - Unknown ids give `None`, so check before use.

# %%
for type_id in ["en", "fr", "de"]:
    greeter = typefactory.create_object(Greeter, type_id)
    print(type_id, "->", greeter.greet() if greeter is not None else None)

# %%
# The per-capability registry is reachable directly as well
print(typefactory.Factory[Greeter])
print(typefactory.Factory[Greeter].create_object("en").greet())

# %% [markdown]
# ## Duplicate ids
#
# A second class claiming a taken id is reported on the `typefactory`
# logger and replaces the first one.

# %%
@add_production(Greeter)
@production_type_id("en")
class Casual(Producible, Greeter):
    def greet(self) -> str:
        return "hey"


print(typefactory.create_object(Greeter, "en").greet())
