from __future__ import annotations

import apod_client
import apod_client.apod as apod


def test_package_exports_clients_config_model_and_errors():
    expected = {
        "ApodClient",
        "AsyncApodClient",
        "ApodClientConfig",
        "Apod",
        "ApodInvalidCredentialError",
        "ApodRequestFailure",
        "ApodTransportError",
        "ApodRemoteError",
        "ApodDecodeError",
    }
    assert expected.issubset(set(apod_client.__all__))
    for name in apod_client.__all__:
        assert hasattr(apod_client, name)


def test_apod_package_exports_models_and_modes_only():
    assert set(apod.__all__) == {
        "Apod",
        "Latest",
        "ByDate",
        "RandomSample",
        "DateRange",
        "DateFrom",
        "QueryMode",
    }
    assert not hasattr(apod, "ApodService")
    assert not hasattr(apod, "AsyncApodService")
