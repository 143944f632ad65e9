"""Model-based testing of the coffee shop.

This package checks a running coffee shop against a reference model:

- ``model``: the expected state and answers of the shop
- ``postconditions``: composable checks of live responses
- ``actions``: ordering, status checks and database fault injection
- ``sequences``: Hypothesis strategies and execution of action sequences
- ``properties``: the property scenarios and their Hypothesis integration
"""
