# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generate Go structs and routing scaffolding from RAML 1.0 API descriptions."""
