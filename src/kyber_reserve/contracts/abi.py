"""
ABI fragments of the reserve contracts, limited to the functions the proxies use.
"""


def _fn(name, inputs=(), outputs=(), mutability="nonpayable"):
    return {
        "name": name,
        "inputs": [{"name": n, "type": t} for n, t in inputs],
        "outputs": [{"name": n, "type": t} for n, t in outputs],
        "stateMutability": mutability,
        "type": "function",
    }


def _view(name, inputs=(), outputs=()):
    return _fn(name, inputs, outputs, mutability="view")


RESERVE_ABI = [
    _fn("enableTrade", outputs=[("", "bool")]),
    _fn("disableTrade", outputs=[("", "bool")]),
    _view("tradeEnabled", outputs=[("", "bool")]),
    _fn("setContracts", inputs=[
        ("_kyberNetwork", "address"),
        ("_conversionRates", "address"),
        ("_sanityRates", "address"),
    ]),
    _view("kyberNetwork", outputs=[("", "address")]),
    _view("conversionRatesContract", outputs=[("", "address")]),
    _view("sanityRatesContract", outputs=[("", "address")]),
    _fn("approveWithdrawAddress", inputs=[
        ("token", "address"),
        ("addr", "address"),
        ("approve", "bool"),
    ]),
    _view("approvedWithdrawAddresses", inputs=[("", "bytes32")], outputs=[("", "bool")]),
    _fn("withdraw", inputs=[
        ("token", "address"),
        ("amount", "uint256"),
        ("destination", "address"),
    ], outputs=[("", "bool")]),
    _view("getBalance", inputs=[("token", "address")], outputs=[("", "uint256")]),
]

CONVERSION_RATES_ABI = [
    _view("getTokenBasicData", inputs=[("token", "address")], outputs=[("listed", "bool"), ("enabled", "bool")]),
    _view("getTokenControlInfo", inputs=[("token", "address")], outputs=[
        ("minimalRecordResolution", "uint256"),
        ("maxPerBlockImbalance", "uint256"),
        ("maxTotalImbalance", "uint256"),
    ]),
    _view("getCompactData", inputs=[("token", "address")], outputs=[
        ("arrayIndex", "uint256"),
        ("fieldOffset", "uint256"),
        ("buy", "bytes1"),
        ("sell", "bytes1"),
    ]),
    _fn("addToken", inputs=[("token", "address")]),
    _fn("setTokenControlInfo", inputs=[
        ("token", "address"),
        ("minimalRecordResolution", "uint256"),
        ("maxPerBlockImbalance", "uint256"),
        ("maxTotalImbalance", "uint256"),
    ]),
    _fn("enableTokenTrade", inputs=[("token", "address")]),
    _fn("setQtyStepFunction", inputs=[
        ("token", "address"),
        ("xBuy", "int256[]"),
        ("yBuy", "int256[]"),
        ("xSell", "int256[]"),
        ("ySell", "int256[]"),
    ]),
    _fn("setImbalanceStepFunction", inputs=[
        ("token", "address"),
        ("xBuy", "int256[]"),
        ("yBuy", "int256[]"),
        ("xSell", "int256[]"),
        ("ySell", "int256[]"),
    ]),
    _fn("setBaseRate", inputs=[
        ("tokens", "address[]"),
        ("baseBuy", "uint256[]"),
        ("baseSell", "uint256[]"),
        ("buy", "bytes14[]"),
        ("sell", "bytes14[]"),
        ("blockNumber", "uint256"),
        ("indices", "uint256[]"),
    ]),
    _view("getRate", inputs=[
        ("token", "address"),
        ("currentBlockNumber", "uint256"),
        ("buy", "bool"),
        ("qty", "uint256"),
    ], outputs=[("", "uint256")]),
]

SANITY_RATES_ABI = [
    _fn("setSanityRates", inputs=[("srcs", "address[]"), ("rates", "uint256[]")]),
    _view("getSanityRate", inputs=[("src", "address"), ("dest", "address")], outputs=[("", "uint256")]),
    _view("reasonableDiffInBps", inputs=[("", "address")], outputs=[("", "uint256")]),
    _fn("setReasonableDiff", inputs=[("srcs", "address[]"), ("diff", "uint256[]")]),
]
