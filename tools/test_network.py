#!/usr/bin/env python3
"""
Test suite for NeuralNetwork construction, forward pass, and the
backward pass / in-place weight update.

Covers:
  1. Weight shapes and U[0,1) initialization bounds
  2. Seed reproducibility and injected generators
  3. Forward-pass shape law, activation range, determinism
  4. Input row-count mismatch -> ShapeMismatchError
  5. Backward pass against a hand-written reference, including the
     hidden error being propagated from the raw output error
  6. Gradient sign law and Untrained -> Trained state
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import pytest

from xornet import NeuralNetwork, NeuralError, NeuralException, ShapeMismatchError
from xornet import xor_dataset


def reference_step(w_ih, w_ho, x, t, lr):
    """One epoch written directly in numpy; returns updated copies."""
    sig = lambda z: 1.0 / (1.0 + np.exp(-z))
    h = sig(w_ih @ x)
    o = sig(w_ho @ h)
    e = t - o
    out_grad = lr * (o * (1 - o) * e)
    hid_err = w_ho.T @ e
    hid_grad = lr * (h * (1 - h) * hid_err)
    return w_ih + hid_grad @ x.T, w_ho + out_grad @ h.T


def test_weight_shapes():
    for i, h, o in [(1, 1, 1), (2, 2, 1), (3, 5, 2), (7, 4, 3)]:
        net = NeuralNetwork(i, h, o, seed=0)
        assert net.weights_input_hidden.shape == (h, i)
        assert net.weights_hidden_output.shape == (o, h)
        assert (net.input_size, net.hidden_size, net.output_size) == (i, h, o)
        assert net.weights_input_hidden.dtype == np.float64


def test_initialization_bounds():
    for seed in range(10):
        net = NeuralNetwork(4, 6, 3, seed=seed)
        for w in net.parameters():
            assert np.all(w >= 0.0)
            assert np.all(w < 1.0)


def test_invalid_sizes_rejected():
    for sizes in [(0, 2, 1), (2, 0, 1), (2, 2, 0), (-1, 2, 1), (2.0, 2, 1)]:
        with pytest.raises(NeuralException) as info:
            NeuralNetwork(*sizes)
        assert info.value.error_code == NeuralError.INVALID_ARGUMENT


def test_sizes_read_only():
    net = NeuralNetwork(2, 2, 1, seed=0)
    with pytest.raises(AttributeError):
        net.hidden_size = 5


def test_seed_reproducible():
    a = NeuralNetwork(2, 3, 1, seed=1234)
    b = NeuralNetwork(2, 3, 1, seed=1234)
    c = NeuralNetwork(2, 3, 1, seed=4321)
    np.testing.assert_array_equal(a.weights_input_hidden, b.weights_input_hidden)
    np.testing.assert_array_equal(a.weights_hidden_output, b.weights_hidden_output)
    assert not np.array_equal(a.weights_input_hidden, c.weights_input_hidden)
    assert a.seed == 1234


def test_default_seed_from_clock():
    net = NeuralNetwork(2, 2, 1)
    assert isinstance(net.seed, int)
    assert net.seed > 0


def test_injected_generator():
    net = NeuralNetwork(2, 2, 1, seed=99, rng=np.random.default_rng(5))
    ref = NeuralNetwork(2, 2, 1, seed=5)
    assert net.seed is None
    np.testing.assert_array_equal(net.weights_input_hidden, ref.weights_input_hidden)


def test_networks_do_not_share_weights():
    a = NeuralNetwork(2, 2, 1, seed=3)
    b = NeuralNetwork(2, 2, 1, seed=3)
    a.weights_input_hidden[0, 0] = 42.0
    assert b.weights_input_hidden[0, 0] != 42.0


def test_forward_shape_law():
    rng = np.random.default_rng(0)
    for i, h, o, n in [(2, 2, 1, 4), (3, 5, 2, 1), (4, 3, 6, 9)]:
        net = NeuralNetwork(i, h, o, seed=1)
        hidden, out = net.forward(rng.normal(size=(i, n)))
        assert hidden.shape == (h, n)
        assert out.shape == (o, n)


def test_activation_range():
    net = NeuralNetwork(3, 4, 2, seed=2)
    x = np.random.default_rng(2).uniform(-5, 5, size=(3, 16))
    hidden, out = net.forward(x)
    assert np.all((hidden > 0) & (hidden < 1))
    assert np.all((out > 0) & (out < 1))


def test_forward_deterministic_and_pure():
    net = NeuralNetwork(2, 2, 1, seed=8)
    x = xor_dataset().inputs
    w_ih = net.weights_input_hidden.copy()
    w_ho = net.weights_hidden_output.copy()
    h1, o1 = net.forward(x)
    h2, o2 = net.forward(x)
    np.testing.assert_array_equal(h1, h2)
    np.testing.assert_array_equal(o1, o2)
    np.testing.assert_array_equal(net.weights_input_hidden, w_ih)
    np.testing.assert_array_equal(net.weights_hidden_output, w_ho)
    np.testing.assert_array_equal(net.predict(x), o1)
    np.testing.assert_array_equal(net(x), o1)


def test_forward_rejects_wrong_row_count():
    net = NeuralNetwork(2, 2, 1, seed=0)
    for bad in [np.zeros((3, 4)), np.zeros((1, 4)), np.zeros((4, 2))]:
        with pytest.raises(ShapeMismatchError):
            net.forward(bad)


def test_backward_matches_reference():
    data = xor_dataset()
    net = NeuralNetwork(2, 3, 1, seed=11)
    lr = 0.5
    exp_ih, exp_ho = reference_step(
        net.weights_input_hidden.copy(), net.weights_hidden_output.copy(),
        data.inputs, data.targets, lr,
    )
    hidden, out = net.forward(data.inputs)
    error = net.backward(data.inputs, data.targets, hidden, out, lr)

    np.testing.assert_allclose(error, data.targets - out)
    np.testing.assert_allclose(net.weights_input_hidden, exp_ih, rtol=1e-12)
    np.testing.assert_allclose(net.weights_hidden_output, exp_ho, rtol=1e-12)


def test_hidden_error_uses_raw_output_error():
    # Propagating the scaled gradient instead would give a different update.
    data = xor_dataset()
    net = NeuralNetwork(2, 2, 1, seed=21)
    w_ih, w_ho = net.weights_input_hidden.copy(), net.weights_hidden_output.copy()
    lr = 0.5

    hidden, out = net.forward(data.inputs)
    net.backward(data.inputs, data.targets, hidden, out, lr)

    e = data.targets - out
    out_grad = lr * out * (1 - out) * e
    alt_hid_grad = lr * hidden * (1 - hidden) * (w_ho.T @ out_grad)
    alt_w_ih = w_ih + alt_hid_grad @ data.inputs.T
    assert not np.allclose(net.weights_input_hidden, alt_w_ih)


def test_update_is_in_place():
    data = xor_dataset()
    net = NeuralNetwork(2, 2, 1, seed=4)
    w_ih, w_ho = net.parameters()
    before = w_ih.copy()
    net.train(data.inputs, data.targets, epochs=3, learning_rate=0.1)
    assert net.weights_input_hidden is w_ih
    assert net.weights_hidden_output is w_ho
    assert w_ih.shape == (2, 2) and w_ho.shape == (1, 2)
    assert not np.array_equal(w_ih, before)


def test_backward_target_mismatch():
    data = xor_dataset()
    net = NeuralNetwork(2, 2, 1, seed=0)
    hidden, out = net.forward(data.inputs)
    with pytest.raises(ShapeMismatchError):
        net.backward(data.inputs, np.zeros((1, 3)), hidden, out, 0.1)


def test_gradient_sign_law():
    x = np.array([[1.0], [1.0]])
    t = np.array([[1.0]])
    net = NeuralNetwork(2, 3, 1, seed=6)
    before = net.predict(x)
    assert np.all(t - before > 0)
    net.train(x, t, epochs=1, learning_rate=0.1)
    assert np.all(net.predict(x) > before)


def test_state_transition():
    data = xor_dataset()
    net = NeuralNetwork(2, 2, 1, seed=0)
    assert not net.is_trained
    net.train(data.inputs, data.targets, epochs=0, learning_rate=0.1)
    assert not net.is_trained
    net.train(data.inputs, data.targets, epochs=5, learning_rate=0.1)
    assert net.is_trained
    assert net.epochs_trained == 5
    assert "epochs_trained=5" in repr(net)


def test_train_runs_exact_epoch_count():
    data = xor_dataset()
    net = NeuralNetwork(2, 2, 1, seed=0)
    seen = []
    net.train(data.inputs, data.targets, epochs=7, learning_rate=0.1,
              callback=lambda epoch, err: seen.append((epoch, err.shape)))
    assert seen == [(e, (1, 4)) for e in range(7)]


def test_train_rejects_negative_epochs():
    data = xor_dataset()
    net = NeuralNetwork(2, 2, 1, seed=0)
    with pytest.raises(NeuralException):
        net.train(data.inputs, data.targets, epochs=-1, learning_rate=0.1)


def test_output_update_is_scaled_negative_gradient():
    # For the output layer the update equals -lr * dL/dW with L = 0.5 * SSE.
    data = xor_dataset()
    net = NeuralNetwork(2, 2, 1, seed=13)
    lr = 0.1
    w_ih = net.weights_input_hidden.copy()
    w_ho = net.weights_hidden_output.copy()
    sig = lambda z: 1.0 / (1.0 + np.exp(-z))
    h = sig(w_ih @ data.inputs)

    def loss(w):
        return 0.5 * np.sum((data.targets - sig(w @ h)) ** 2)

    eps = 1e-6
    grad = np.zeros_like(w_ho)
    for idx in np.ndindex(*w_ho.shape):
        plus, minus = w_ho.copy(), w_ho.copy()
        plus[idx] += eps
        minus[idx] -= eps
        grad[idx] = (loss(plus) - loss(minus)) / (2 * eps)

    hidden, out = net.forward(data.inputs)
    net.backward(data.inputs, data.targets, hidden, out, lr)
    np.testing.assert_allclose(net.weights_hidden_output - w_ho, -lr * grad,
                               rtol=1e-5, atol=1e-9)


def main():
    tests = [
        test_weight_shapes,
        test_initialization_bounds,
        test_invalid_sizes_rejected,
        test_sizes_read_only,
        test_seed_reproducible,
        test_default_seed_from_clock,
        test_injected_generator,
        test_networks_do_not_share_weights,
        test_forward_shape_law,
        test_activation_range,
        test_forward_deterministic_and_pure,
        test_forward_rejects_wrong_row_count,
        test_backward_matches_reference,
        test_hidden_error_uses_raw_output_error,
        test_update_is_in_place,
        test_backward_target_mismatch,
        test_gradient_sign_law,
        test_state_transition,
        test_train_runs_exact_epoch_count,
        test_train_rejects_negative_epochs,
        test_output_update_is_scaled_negative_gradient,
    ]

    passed = 0
    failed = 0

    for test in tests:
        try:
            test()
            print(f"  PASS: {test.__name__}")
            passed += 1
        except Exception as e:
            print(f"  FAIL: {test.__name__}: {e}")
            import traceback
            traceback.print_exc()
            failed += 1

    print("=" * 60)
    print(f"Results: {passed} passed, {failed} failed")
    print("=" * 60)

    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
